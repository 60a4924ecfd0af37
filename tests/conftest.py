"""Shared test fixtures and configuration."""

from pathlib import Path
import sys

# Add survey_tool_cli/ to Python path so `from surveycheck.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "survey_tool_cli"))

import pytest

from surveycheck.checker import schema_store

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def valid_survey_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "valid_survey.yaml"


@pytest.fixture
def product_schema() -> schema_store.SchemaDefinition:
    """Small ad-hoc schema with one required integer and one string field."""
    return schema_store.compile_schema({
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "properties": {
            "productId": {"type": "integer"},
            "productName": {"type": "string"},
        },
        "required": ["productId"],
    })


@pytest.fixture(autouse=True)
def _fresh_schema_cache():
    schema_store.clear_cache()
    yield
    schema_store.clear_cache()
