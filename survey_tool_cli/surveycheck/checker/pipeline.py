"""Config check pipeline: orchestrates all steps of one run in sequence."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from surveycheck.checker import schema_store
from surveycheck.checker.documents import DocumentValue, parse
from surveycheck.checker.models import ValidationReport, Violation
from surveycheck.checker.report import ReportAggregator
from surveycheck.checker.schema_eval import validate
from surveycheck.config import Settings
from surveycheck.errors import SourceError

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yaml", ".yml")
MIN_DOCUMENTS = 2


def _extension_failure(source_name: str) -> ValidationReport | None:
    if source_name.endswith(YAML_EXTENSIONS):
        return None
    logger.debug("Rejecting %s: no YAML extension", source_name)
    report = ReportAggregator.start_pessimistic()
    report.record_structural_failure("File has no Yaml extension (.yaml or .yml)")
    return report.finish()


def _evaluate_all(
    documents: list[DocumentValue],
    schema: schema_store.SchemaDefinition,
    max_workers: int,
) -> list[list[Violation]]:
    """Validate every document, returning results in document order."""
    if max_workers <= 1 or len(documents) <= 1:
        return [validate(doc, schema, i) for i, doc in enumerate(documents)]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(
            pool.map(validate, documents, [schema] * len(documents), range(len(documents)))
        )


def check_source(
    source_text: str, source_name: str, settings: Settings | None = None,
) -> ValidationReport:
    """Check already-loaded configuration text.

    Order: 1. Extension → 2. YAML parsing → 3. Document count → 4. Schema.
    Parse errors propagate as DocumentParseError. Everything else ends up
    in the returned report.
    """
    settings = settings or Settings()

    # Step 1: naming convention
    failed = _extension_failure(source_name)
    if failed is not None:
        return failed

    # Step 2: split into documents
    documents = parse(source_text)

    # Step 3: header plus at least one page
    if len(documents) < MIN_DOCUMENTS:
        report = ReportAggregator.start_pessimistic()
        report.record_structural_failure(
            f"Found only {len(documents)} documents in yaml. "
            f"At least {MIN_DOCUMENTS} (survey header and one page) are needed"
        )
        return report.finish()

    # Step 4: schema evaluation per document
    schema = schema_store.load()
    report = ReportAggregator.start_optimistic()
    results = _evaluate_all(documents, schema, settings.max_workers)
    for index, violations in enumerate(results):
        report.record_document_violations(index, violations)

    result = report.finish()
    logger.info(
        "Checked %s: %d document(s), %d failure(s)",
        source_name, len(documents), len(result.failures),
    )
    return result


def check_config(path: str | Path, settings: Settings | None = None) -> ValidationReport:
    """Check a survey configuration file on disk.

    Raises SourceError if the file does not exist or cannot be read.
    """
    path = Path(path)
    if not path.exists():
        raise SourceError(path, "file does not exist")

    failed = _extension_failure(path.name)
    if failed is not None:
        return failed

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(path, str(e)) from e

    return check_source(text, path.name, settings)
