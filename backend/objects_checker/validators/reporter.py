"""Severity reporter, the single channel every check reports through.

A reporter is constructed per validation run, so counts from one run never
leak into another.
"""

import structlog

from objects_checker.validators.models import Finding, FindingCode, Severity

logger = structlog.get_logger()


class SeverityReporter:
    """Records findings and keeps running error/warning counts."""

    def __init__(self):
        self.findings: list[Finding] = []
        self.error_count = 0
        self.warning_count = 0
        self.current_check = ""

    def reset(self) -> None:
        self.findings = []
        self.error_count = 0
        self.warning_count = 0
        self.current_check = ""

    def report(self, severity: Severity, code: FindingCode, message: str) -> Finding:
        """Append a finding and bump the counter for its severity."""
        finding = Finding(code=code, severity=severity, message=message, check=self.current_check)
        self.findings.append(finding)

        if severity == Severity.ERROR:
            self.error_count += 1
        else:
            self.warning_count += 1

        logger.debug(
            "finding_reported",
            check=self.current_check,
            code=code.value,
            severity=severity.value,
        )
        return finding

    def error(self, code: FindingCode, message: str) -> Finding:
        return self.report(Severity.ERROR, code, message)

    def warning(self, code: FindingCode, message: str) -> Finding:
        return self.report(Severity.WARNING, code, message)

    def mark(self) -> int:
        """Position to pass to since() later."""
        return len(self.findings)

    def since(self, mark: int) -> list[Finding]:
        return self.findings[mark:]
