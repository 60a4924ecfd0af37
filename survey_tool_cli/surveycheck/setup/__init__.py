"""Host prerequisite checks for running the Survey Tool application."""

from surveycheck.setup.prereqs import check_host

__all__ = ["check_host"]
