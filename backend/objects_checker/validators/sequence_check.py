"""Sequence Check — detects gaps in the sorted id sequence."""

from objects_checker.models.catalog import CatalogObject, ObjectClass
from objects_checker.validators.base import BaseCheck
from objects_checker.validators.models import FindingCode
from objects_checker.validators.reporter import SeverityReporter

# Ids are expected to start at 1, so the walk starts from a synthetic 0
SEQUENCE_START = 0


class SequenceCheck(BaseCheck):
    """Ids sorted ascending must have no missing values between them."""

    @property
    def name(self) -> str:
        return "CheckForIdSequence"

    def run(
        self,
        classes: list[ObjectClass],
        objects: list[CatalogObject],
        reporter: SeverityReporter,
    ) -> None:
        previous_id = SEQUENCE_START

        for current_id in sorted(obj.id for obj in objects):
            gap = current_id - previous_id

            # 0 is a duplicate, 1 is consecutive; neither is a gap
            if gap > 1:
                reporter.error(
                    FindingCode.ID_SEQUENCE_GAP,
                    f"There's {gap} number gap between Ids '{previous_id}' and '{current_id}'",
                )

            previous_id = current_id
