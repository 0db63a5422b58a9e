"""Check and validation report types."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CheckResult(BaseModel):
    """Result of a single verification check."""

    name: str
    passed: bool
    value: float = 0.0
    threshold: float = 0.0
    message: str = ""


class ValidationReport(BaseModel):
    """Outcome of validating a parameter record, errors keyed by field name."""

    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0
