"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from surveycheck.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "SURVEYCHECK_"


class Settings(BaseModel):
    """Checker settings. Every field can be overridden via ``SURVEYCHECK_<NAME>``."""

    max_workers: int = Field(default=1, ge=1)
    min_java_version: int = Field(default=21, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults.

    Raises ``ConfigError`` naming the first variable with an unusable value.
    """
    overrides: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            overrides[name] = raw.strip()
    try:
        settings = Settings.model_validate(overrides)
    except ValidationError as e:
        error = e.errors()[0]
        name = str(error["loc"][0]) if error["loc"] else ""
        raise ConfigError(f"{ENV_PREFIX}{name.upper()}", error["msg"]) from e
    logger.debug("Loaded settings: %s", settings.model_dump())
    return settings
