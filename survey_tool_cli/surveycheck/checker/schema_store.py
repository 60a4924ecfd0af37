"""Embedded survey schema: loaded, checked and compiled once per process."""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from importlib import resources
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from surveycheck.errors import SchemaLoadError

logger = logging.getLogger(__name__)

SCHEMA_PACKAGE = "surveycheck.checker"
SCHEMA_RESOURCE = "survey.schema.json"


HEADER_DEF = "header"
PAGE_DEF = "page"


@dataclass(frozen=True)
class SchemaDefinition:
    """A compiled schema. Shared read-only between runs and threads.

    Schemas defining both ``$defs/header`` and ``$defs/page`` check documents by
    position: the first against the header, every other one against the page.
    Any other schema applies its root to every document.
    """

    raw: dict[str, Any]
    validator: Draft202012Validator
    header: Draft202012Validator | None = None
    page: Draft202012Validator | None = None

    def for_document(self, document_index: int) -> tuple[Draft202012Validator, str]:
        """Return the validator for a document and the schema pointer it starts at."""
        if self.header is None or self.page is None:
            return self.validator, ""
        if document_index == 0:
            return self.header, f"/$defs/{HEADER_DEF}"
        return self.page, f"/$defs/{PAGE_DEF}"


_lock = threading.Lock()
_compiled: SchemaDefinition | None = None


def compile_schema(raw: Any) -> SchemaDefinition:
    """Check ``raw`` against the draft 2020-12 meta-schema and compile it."""
    if not isinstance(raw, dict):
        raise SchemaLoadError(f"Schema must be a JSON object, got {type(raw).__name__}")
    try:
        Draft202012Validator.check_schema(raw)
    except SchemaError as e:
        raise SchemaLoadError(f"Invalid survey schema: {e.message}") from e
    defs = raw.get("$defs", {})
    if HEADER_DEF in defs and PAGE_DEF in defs:
        return SchemaDefinition(
            raw=raw,
            validator=Draft202012Validator(raw),
            header=Draft202012Validator(_entry_point(raw, HEADER_DEF)),
            page=Draft202012Validator(_entry_point(raw, PAGE_DEF)),
        )
    return SchemaDefinition(raw=raw, validator=Draft202012Validator(raw))


def _entry_point(raw: dict[str, Any], name: str) -> dict[str, Any]:
    """A root schema that only references ``$defs/<name>`` of ``raw``."""
    return {
        "$schema": raw.get("$schema", Draft202012Validator.META_SCHEMA["$id"]),
        "$defs": raw["$defs"],
        "$ref": f"#/$defs/{name}",
    }


def _read_embedded() -> Any:
    try:
        resource = resources.files(SCHEMA_PACKAGE) / "schema" / SCHEMA_RESOURCE
        text = resource.read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as e:
        raise SchemaLoadError(f"Embedded schema {SCHEMA_RESOURCE} not found") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(
            f"Invalid JSON in {SCHEMA_RESOURCE} (line {e.lineno}): {e.msg}"
        ) from e


def load() -> SchemaDefinition:
    """Return the compiled survey schema, compiling it on first use."""
    global _compiled
    if _compiled is not None:
        return _compiled
    with _lock:
        if _compiled is None:
            _compiled = compile_schema(_read_embedded())
            logger.debug("Compiled embedded schema %s", SCHEMA_RESOURCE)
    return _compiled


def clear_cache() -> None:
    """Drop the compiled schema. Useful for testing."""
    global _compiled
    with _lock:
        _compiled = None
