"""Multi-document YAML parsing using ruamel.yaml."""

from __future__ import annotations

import datetime
import logging
from io import StringIO
from typing import Any, Union

from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.scalarbool import ScalarBoolean

from surveycheck.errors import DocumentParseError

logger = logging.getLogger(__name__)

# Plain JSON-compatible tree: what the schema evaluator sees.
DocumentValue = Union[dict[str, Any], list[Any], str, int, float, bool, None]


def to_plain(node: Any) -> DocumentValue:
    """Convert ruamel round-trip types into plain JSON-compatible values.

    Mapping order is kept. Keys are stringified like JSON object keys,
    timestamps become ISO-8601 strings.
    """
    if hasattr(node, "items"):
        return {str(key): to_plain(value) for key, value in node.items()}
    if isinstance(node, (list, tuple)):
        return [to_plain(item) for item in node]
    if isinstance(node, ScalarBoolean):
        return bool(node)
    if isinstance(node, bool) or node is None:
        return node
    if isinstance(node, int):
        return int(node)
    if isinstance(node, float):
        return float(node)
    if isinstance(node, (datetime.date, datetime.time)):
        return node.isoformat()
    if isinstance(node, bytes):
        return node.decode("utf-8", errors="replace")
    return str(node)


def parse(raw_text: str) -> list[DocumentValue]:
    """Split YAML text on ``---`` and load every document, in order.

    Raises DocumentParseError for the first malformed document. Count and
    schema constraints are not checked here.
    """
    yaml = YAML()
    documents: list[DocumentValue] = []

    try:
        for document in yaml.load_all(StringIO(raw_text)):
            documents.append(to_plain(document))
    except YAMLError as e:
        line = None
        mark = getattr(e, "problem_mark", None) or getattr(e, "context_mark", None)
        if mark is not None:
            line = mark.line + 1  # 0-indexed to 1-indexed
        raise DocumentParseError(str(e), document_index=len(documents), line=line) from e

    logger.debug("Parsed %d YAML document(s)", len(documents))
    return documents
