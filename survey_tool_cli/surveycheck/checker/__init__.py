"""Config check pipeline for survey configuration YAML."""

from surveycheck.checker.models import ValidationReport, Violation
from surveycheck.checker.pipeline import check_config, check_source
from surveycheck.checker.report import ReportAggregator, format_violation

__all__ = [
    "ReportAggregator",
    "ValidationReport",
    "Violation",
    "check_config",
    "check_source",
    "format_violation",
]
