"""Tests for the config check pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from surveycheck.checker import ValidationReport, check_config, check_source
from surveycheck.checker import pipeline
from surveycheck.config import Settings
from surveycheck.errors import DocumentParseError, SourceError

HEADER = "title: Survey\ndescription: About things\n"
PAGE = "title: Page\ncontent:\n  - type: TEXT\n    title: Name?\n"
BAD_PAGE = "title: Page\ncontent:\n  - type: TEXT\n    title: 7\n    multiline: maybe\n"


def _assert_consistent(report: ValidationReport) -> None:
    assert report.all_passed == (report.failures == [])


def _yaml(*documents: str) -> str:
    return "---\n".join(documents)


class TestCheckSource:
    def test_header_and_page_pass(self) -> None:
        report = check_source(_yaml(HEADER, PAGE), "survey.yaml")
        assert report.all_passed is True
        assert report.failures == []
        assert report.successes == []
        _assert_consistent(report)

    def test_single_document_fails_precondition(self) -> None:
        report = check_source(HEADER, "survey.yaml")
        assert report.all_passed is False
        assert report.failures == [
            "Found only 1 documents in yaml. At least 2 (survey header and one page) are needed"
        ]
        _assert_consistent(report)

    def test_empty_text_fails_precondition(self) -> None:
        report = check_source("", "survey.yml")
        assert len(report.failures) == 1
        assert "Found only 0 documents" in report.failures[0]
        _assert_consistent(report)

    def test_too_few_documents_skips_schema(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail() -> None:
            raise AssertionError("schema must not be loaded")

        monkeypatch.setattr(pipeline.schema_store, "load", _fail)
        report = check_source(HEADER, "survey.yaml")
        assert report.all_passed is False

    def test_missing_header_field_reports_document_1(self) -> None:
        report = check_source(_yaml("description: no title\n", PAGE), "survey.yaml")
        assert report.all_passed is False
        assert len(report.failures) == 1
        assert "'title' is a required property" in report.failures[0]
        assert "document 1" in report.failures[0]
        _assert_consistent(report)

    def test_two_violations_in_one_document(self) -> None:
        report = check_source(_yaml(HEADER, BAD_PAGE), "survey.yaml")
        assert len(report.failures) == 2
        assert all("document 2" in f for f in report.failures)
        assert "loc /content/0/title" in report.failures[0]
        assert "loc /content/0/multiline" in report.failures[1]
        _assert_consistent(report)

    def test_document_numbers_follow_position(self) -> None:
        text = _yaml(HEADER, PAGE, PAGE, BAD_PAGE, PAGE, BAD_PAGE)
        report = check_source(text, "survey.yaml")
        assert len(report.failures) == 4
        assert [f.count("document 4") for f in report.failures[:2]] == [1, 1]
        assert [f.count("document 6") for f in report.failures[2:]] == [1, 1]
        _assert_consistent(report)

    def test_two_headers_fail(self) -> None:
        report = check_source(_yaml(HEADER, HEADER), "survey.yaml")
        assert report.all_passed is False
        assert len(report.failures) == 1
        assert "'content' is a required property" in report.failures[0]
        assert "document 2," in report.failures[0]
        assert "schema /$defs/page/required" in report.failures[0]
        _assert_consistent(report)

    def test_page_first_then_header_fails(self) -> None:
        report = check_source(_yaml(PAGE, HEADER), "survey.yaml")
        assert report.all_passed is False
        assert any(
            "document 1," in f and "'description' is a required property" in f
            for f in report.failures
        )
        assert any(
            "document 2," in f and "'content' is a required property" in f
            for f in report.failures
        )
        _assert_consistent(report)

    def test_bad_extension_never_parses(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail(raw_text: str) -> list:
            raise AssertionError("must not parse")

        monkeypatch.setattr(pipeline, "parse", _fail)
        report = check_source(_yaml(HEADER, PAGE), "survey.json")
        assert report.all_passed is False
        assert report.failures == ["File has no Yaml extension (.yaml or .yml)"]
        _assert_consistent(report)

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(DocumentParseError):
            check_source(_yaml(HEADER, "title: [unclosed\n"), "survey.yaml")

    def test_parallel_matches_sequential(self) -> None:
        text = _yaml(HEADER, BAD_PAGE, PAGE, BAD_PAGE, "title: 3\n")
        sequential = check_source(text, "survey.yaml", Settings(max_workers=1))
        parallel = check_source(text, "survey.yaml", Settings(max_workers=4))
        assert parallel == sequential
        _assert_consistent(parallel)


class TestCheckConfig:
    def test_valid_fixture(self, valid_survey_path: Path) -> None:
        report = check_config(valid_survey_path)
        assert report.failures == []
        assert report.all_passed is True

    def test_header_only_fixture(self, fixtures_dir: Path) -> None:
        report = check_config(fixtures_dir / "header_only.yaml")
        assert report.all_passed is False
        assert "Found only 1 documents" in report.failures[0]
        assert "At least 2" in report.failures[0]

    def test_invalid_fixture_reports_all_documents(self, fixtures_dir: Path) -> None:
        report = check_config(fixtures_dir / "invalid_survey.yaml")
        assert report.all_passed is False
        assert len(report.failures) == 3
        assert sum("document 1," in f for f in report.failures) == 2
        assert sum("document 3," in f for f in report.failures) == 1
        assert not any("document 2," in f for f in report.failures)
        _assert_consistent(report)

    def test_malformed_fixture_raises(self, fixtures_dir: Path) -> None:
        with pytest.raises(DocumentParseError) as exc_info:
            check_config(fixtures_dir / "malformed.yaml")
        assert exc_info.value.document_index == 1

    def test_wrong_extension_fixture(self, fixtures_dir: Path) -> None:
        report = check_config(fixtures_dir / "notes.txt")
        assert report.all_passed is False
        assert report.failures == ["File has no Yaml extension (.yaml or .yml)"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SourceError):
            check_config(tmp_path / "absent.yaml")

    def test_directory_raises(self, tmp_path: Path) -> None:
        folder = tmp_path / "config.yaml"
        folder.mkdir()
        with pytest.raises(SourceError):
            check_config(folder)

    def test_non_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"title: caf\xe9\n")
        with pytest.raises(SourceError):
            check_config(path)

    def test_yml_extension_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "survey.yml"
        path.write_text(_yaml(HEADER, PAGE), encoding="utf-8")
        assert check_config(str(path)).all_passed is True
