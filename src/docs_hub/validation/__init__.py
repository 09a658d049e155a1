"""Content validation: schema checks plus cross-collection references."""

from docs_hub.validation.checks import build_check, validate_content
from docs_hub.validation.report import Severity, ValidationIssue, ValidationReport

__all__ = [
    "build_check",
    "validate_content",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
]
