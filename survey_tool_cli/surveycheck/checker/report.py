"""Report aggregation: collects failures of one run into a ValidationReport."""

from __future__ import annotations

from collections.abc import Iterable

from surveycheck.checker.models import ValidationReport, Violation


def format_violation(violation: Violation) -> str:
    """Render a violation as a single line. Document numbers are 1-based."""
    return (
        f"{violation.message} (document {violation.document_index + 1}, "
        f"loc {violation.instance_location} - schema {violation.schema_location})"
    )


class ReportAggregator:
    """Mutable accumulator for a single run.

    Only one thread may write to an aggregator. ``finish`` hands out an
    immutable ``ValidationReport``.
    """

    def __init__(self, all_passed: bool = True) -> None:
        self.all_passed = all_passed
        self.successes: list[str] = []
        self.failures: list[str] = []
        self.output: str | None = None

    @classmethod
    def start_optimistic(cls) -> ReportAggregator:
        return cls(all_passed=True)

    @classmethod
    def start_pessimistic(cls) -> ReportAggregator:
        """Start a report that has already failed a precondition."""
        return cls(all_passed=False)

    def record_document_violations(
        self, document_index: int, violations: Iterable[Violation],
    ) -> None:
        """Append every violation of one document, keeping their order."""
        for violation in violations:
            if violation.document_index != document_index:
                raise ValueError(
                    f"Violation belongs to document {violation.document_index}, "
                    f"not {document_index}"
                )
            self.failures.append(format_violation(violation))
            self.all_passed = False

    def record_structural_failure(self, message: str) -> None:
        self.failures.append(message)
        self.all_passed = False

    def record_success(self, message: str) -> None:
        self.successes.append(message)

    def set_output(self, text: str | None) -> None:
        self.output = text

    def finish(self) -> ValidationReport:
        return ValidationReport(
            all_passed=self.all_passed,
            successes=list(self.successes),
            failures=list(self.failures),
            output=self.output,
        )
