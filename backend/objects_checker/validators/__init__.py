"""Catalog validators — deterministic checks over a loaded objects catalog.

Usage:
    from objects_checker.validators import validate_catalog

    report = validate_catalog(catalog)
    if report.summary.error_count:
        # Report report.errors to the author
"""

from objects_checker.validators.base import BaseCheck
from objects_checker.validators.engine import ValidationEngine, validate_catalog, validation_engine
from objects_checker.validators.formatting_check import FormattingCheck
from objects_checker.validators.models import (
    CheckResult,
    Finding,
    FindingCode,
    Severity,
    ValidationReport,
    ValidationSummary,
)
from objects_checker.validators.reporter import SeverityReporter
from objects_checker.validators.sequence_check import SequenceCheck
from objects_checker.validators.uniqueness_check import UniquenessCheck

__all__ = [
    "BaseCheck",
    "ValidationEngine",
    "validate_catalog",
    "validation_engine",
    "FormattingCheck",
    "SequenceCheck",
    "UniquenessCheck",
    "SeverityReporter",
    "CheckResult",
    "Finding",
    "FindingCode",
    "Severity",
    "ValidationReport",
    "ValidationSummary",
]
