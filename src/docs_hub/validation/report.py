"""Validation result types."""

from enum import Enum

from pydantic import BaseModel


class Severity(str, Enum):
    """Errors fail the build; warnings are advisory."""

    ERROR = "error"
    WARNING = "warning"


class ValidationIssue(BaseModel):
    """A single problem found in the content tree."""

    collection: str
    entry_id: str
    field: str | None = None
    message: str
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        location = f"{self.collection}/{self.entry_id}"
        if self.field:
            location = f"{location} [{self.field}]"
        return f"{self.severity.value}: {location}: {self.message}"


class ValidationReport(BaseModel):
    """All issues found by one validation run plus per-collection entry counts."""

    issues: list[ValidationIssue] = []
    counts: dict[str, int] = {}

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors
