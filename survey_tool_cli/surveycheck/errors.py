"""Errors raised by the survey configuration checker.

Anything raised from here aborts a run: the caller never gets a report.
Schema violations, bad extensions and too few documents are not errors,
they end up in ``ValidationReport.failures``.
"""

from __future__ import annotations

from pathlib import Path


class SurveyCheckError(Exception):
    """Base class for all checker errors."""


class SourceError(SurveyCheckError):
    """The configuration file is missing or cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")


class DocumentParseError(SurveyCheckError):
    """The YAML text is not well-formed enough to split into documents."""

    def __init__(
        self, message: str, document_index: int, line: int | None = None,
    ) -> None:
        self.document_index = document_index
        self.line = line
        location = f"document {document_index + 1}"
        if line is not None:
            location += f", line {line}"
        super().__init__(f"Invalid YAML in {location}: {message}")


class SchemaLoadError(SurveyCheckError):
    """The embedded survey schema is missing or broken."""


class ConfigError(SurveyCheckError):
    """A ``SURVEYCHECK_*`` environment variable holds an unusable value."""

    def __init__(self, variable: str, reason: str) -> None:
        self.variable = variable
        self.reason = reason
        super().__init__(f"Invalid setting {variable}: {reason}")
