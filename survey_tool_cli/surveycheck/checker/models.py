"""Check result data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Violation(BaseModel):
    """A single schema violation inside one document.

    Both locations are JSON Pointers: ``instance_location`` points into the
    document, ``schema_location`` at the rule that failed.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    document_index: int = Field(ge=0)
    instance_location: str = ""
    schema_location: str = ""


class ValidationReport(BaseModel):
    """Outcome of one check run (config check or setup check)."""

    model_config = ConfigDict(frozen=True)

    all_passed: bool = True
    successes: list[str] = Field(default_factory=list)
    failures: list[str] = Field(default_factory=list)
    output: str | None = None

    @model_validator(mode="after")
    def _flag_matches_failures(self) -> ValidationReport:
        if self.all_passed != (not self.failures):
            raise ValueError(
                f"all_passed={self.all_passed} contradicts {len(self.failures)} failure(s)"
            )
        return self
