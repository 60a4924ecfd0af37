"""Schema evaluation of a single document."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from surveycheck.checker.models import Violation
from surveycheck.checker.schema_store import SchemaDefinition


def json_pointer(path: Iterable[Any]) -> str:
    """Build an RFC 6901 JSON Pointer. The root is the empty string."""
    parts = [str(p).replace("~", "~0").replace("/", "~1") for p in path]
    return "".join(f"/{p}" for p in parts)


def validate(
    value: Any, schema: SchemaDefinition, document_index: int = 0,
) -> list[Violation]:
    """Evaluate one document and return every violation found.

    Evaluation never stops at the first error. The order is the one the
    evaluator produces. An empty list means the document is valid. The first
    document of a survey is checked as its header, all others as pages, and
    schema locations stay rooted in the full schema.
    """
    validator, base = schema.for_document(document_index)
    return [
        Violation(
            message=error.message,
            document_index=document_index,
            instance_location=json_pointer(error.absolute_path),
            schema_location=base + json_pointer(error.absolute_schema_path),
        )
        for error in validator.iter_errors(value)
    ]
