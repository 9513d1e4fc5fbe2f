"""Base check — abstract class implementing the Strategy Pattern.

Each check is a standalone, independently testable unit.
New checks are added without modifying the engine.
"""

from abc import ABC, abstractmethod

from objects_checker.models.catalog import CatalogObject, ObjectClass
from objects_checker.validators.reporter import SeverityReporter


class BaseCheck(ABC):
    """Abstract base for all catalog checks.

    Contract:
        - run() is deterministic: same input → same findings, in the same order
        - run() reports through the reporter and never raises on bad data
        - run() never stops at the first finding
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging and console output."""
        ...

    @abstractmethod
    def run(
        self,
        classes: list[ObjectClass],
        objects: list[CatalogObject],
        reporter: SeverityReporter,
    ) -> None:
        """Run the check and report findings.

        Args:
            classes: Object classes in catalog order
            objects: All objects flattened in catalog traversal order
            reporter: Per-run reporter that receives every finding
        """
        ...

    # ── Helper Methods ──

    @staticmethod
    def _starts_upper(text: str) -> bool:
        """True if the first character is an uppercase letter."""
        return bool(text) and text[0].isupper()

    @staticmethod
    def _starts_numeric_or_upper(text: str) -> bool:
        return bool(text) and (text[0].isnumeric() or text[0].isupper())
