"""Validation Engine — runs every check over a catalog and produces a report.

This is the main entry point for catalog validation. Each run gets its own
SeverityReporter, so repeated runs never share counts.

Usage:
    engine = ValidationEngine()
    report = engine.validate(catalog)
    if report.summary.error_count:
        # Fix the objects file
"""

import time
from typing import Optional

import structlog

from objects_checker.models.catalog import Catalog
from objects_checker.validators.base import BaseCheck
from objects_checker.validators.formatting_check import FormattingCheck
from objects_checker.validators.models import CheckResult, Severity, ValidationReport, ValidationSummary
from objects_checker.validators.reporter import SeverityReporter
from objects_checker.validators.sequence_check import SequenceCheck
from objects_checker.validators.uniqueness_check import UniquenessCheck

logger = structlog.get_logger()


class ValidationEngine:
    """Orchestrates all checks and produces a unified validation report.

    Design principles:
        - Deterministic: same catalog → same report
        - Non-fatal: every check runs to completion whatever earlier checks found
        - Extensible: add checks without modifying the engine
        - Observable: logs every run with per-check timing
    """

    def __init__(self, checks: Optional[list[BaseCheck]] = None):
        """Initialize with the default checks or a custom list.

        Args:
            checks: Optional list of checks. If None, uses all defaults.
        """
        self.checks = checks if checks is not None else self._default_checks()

    @staticmethod
    def _default_checks() -> list[BaseCheck]:
        """Create the default check chain in execution order."""
        return [
            UniquenessCheck(),   # Duplicate ids and names
            SequenceCheck(),     # Gaps between sorted ids
            FormattingCheck(),   # Capitalization and whitespace
        ]

    def validate(self, catalog: Catalog) -> ValidationReport:
        """Run all checks against the catalog and produce a report.

        Args:
            catalog: Loaded catalog; it is never modified

        Returns:
            ValidationReport with findings, per-check results and totals
        """
        start_time = time.perf_counter()

        reporter = SeverityReporter()
        objects = catalog.all_objects()

        check_results: list[CheckResult] = []
        check_timings: dict[str, float] = {}

        for check in self.checks:
            c_start = time.perf_counter()
            reporter.current_check = check.name
            mark = reporter.mark()

            check.run(catalog.classes, objects, reporter)

            found = reporter.since(mark)
            result = CheckResult(
                check=check.name,
                error_count=sum(1 for f in found if f.severity == Severity.ERROR),
                warning_count=sum(1 for f in found if f.severity == Severity.WARNING),
            )
            check_results.append(result)
            check_timings[check.name] = round((time.perf_counter() - c_start) * 1000, 2)

            logger.debug(
                "check_finished",
                check=check.name,
                passed=result.passed,
                errors=result.error_count,
                warnings=result.warning_count,
            )

        summary = ValidationSummary(
            error_count=reporter.error_count,
            warning_count=reporter.warning_count,
            class_count=catalog.class_count,
            object_count=len(objects),
        )
        report = ValidationReport(
            findings=list(reporter.findings),
            checks=check_results,
            summary=summary,
        )

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            passed=summary.passed,
            errors=summary.error_count,
            warnings=summary.warning_count,
            classes=summary.class_count,
            objects=summary.object_count,
            duration_ms=round(total_duration, 2),
            check_timings=check_timings,
        )

        return report

    def add_check(self, check: BaseCheck) -> None:
        """Add a custom check to the end of the chain."""
        self.checks.append(check)

    def remove_check(self, check_name: str) -> None:
        """Remove a check by name."""
        self.checks = [c for c in self.checks if c.name != check_name]


# Module-level singleton
validation_engine = ValidationEngine()


def validate_catalog(catalog: Catalog) -> ValidationReport:
    """Validate with the default check chain."""
    return validation_engine.validate(catalog)
