"""Typed survey configuration model."""

from surveycheck.survey.models import SurveyConfig, SurveyPage

__all__ = ["SurveyConfig", "SurveyPage"]
