"""Validation models — severity levels, finding codes, and report structure.

All validation is deterministic: same catalog in, same report out.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Severity(str, Enum):
    """Finding severity levels."""

    ERROR = "error"      # Structural or integrity violation
    WARNING = "warning"  # Style violation


class FindingCode(str, Enum):
    """Deterministic code for every validation rule.

    Naming convention: SUBJECT_SPECIFIC_ISSUE
    """

    # Uniqueness
    ID_DUPLICATE = "ID_DUPLICATE"
    NAME_DUPLICATE = "NAME_DUPLICATE"

    # Sequence
    ID_SEQUENCE_GAP = "ID_SEQUENCE_GAP"

    # Class formatting
    CLASS_NAMELESS = "CLASS_NAMELESS"
    CLASS_NOT_CAPITALIZED = "CLASS_NOT_CAPITALIZED"
    CLASS_SURROUNDING_WHITESPACE = "CLASS_SURROUNDING_WHITESPACE"
    CLASS_EMBEDDED_WHITESPACE = "CLASS_EMBEDDED_WHITESPACE"

    # Object formatting
    OBJECT_ID_BELOW_ONE = "OBJECT_ID_BELOW_ONE"
    OBJECT_NAMELESS = "OBJECT_NAMELESS"
    OBJECT_NOT_CAPITALIZED = "OBJECT_NOT_CAPITALIZED"
    OBJECT_SURROUNDING_WHITESPACE = "OBJECT_SURROUNDING_WHITESPACE"
    OBJECT_WORD_NOT_CAPITALIZED = "OBJECT_WORD_NOT_CAPITALIZED"


class Finding(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(frozen=True)

    code: FindingCode
    severity: Severity
    message: str
    check: str = ""  # Which check produced this


class CheckResult(BaseModel):
    """Outcome of one check within a run."""

    check: str
    error_count: int = 0
    warning_count: int = 0

    @computed_field
    @property
    def passed(self) -> bool:
        return self.error_count == 0 and self.warning_count == 0


class ValidationSummary(BaseModel):
    """Totals for a whole run. Recomputed every run, never persisted."""

    error_count: int = 0
    warning_count: int = 0
    class_count: int = 0
    object_count: int = 0

    @computed_field
    @property
    def passed(self) -> bool:
        return self.error_count == 0 and self.warning_count == 0


class ValidationReport(BaseModel):
    """Complete validation report — the output of the validation engine."""

    findings: list[Finding] = Field(default_factory=list)
    checks: list[CheckResult] = Field(default_factory=list)
    summary: ValidationSummary = Field(default_factory=ValidationSummary)

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]

    def findings_for(self, check: str) -> list[Finding]:
        """Findings produced by one check, in report order."""
        return [f for f in self.findings if f.check == check]
