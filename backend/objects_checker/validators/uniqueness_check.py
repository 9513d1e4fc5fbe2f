"""Uniqueness Check — detects duplicate ids and duplicate names across all objects."""

from objects_checker.models.catalog import CatalogObject, ObjectClass
from objects_checker.validators.base import BaseCheck
from objects_checker.validators.models import FindingCode
from objects_checker.validators.reporter import SeverityReporter


class UniquenessCheck(BaseCheck):
    """Every id and every name must appear once in the whole catalog.

    The first object seen with an id (or name) owns it; later duplicates are
    reported against that first owner, which is never overwritten.
    """

    @property
    def name(self) -> str:
        return "CheckForUniqueIdsAndNames"

    def run(
        self,
        classes: list[ObjectClass],
        objects: list[CatalogObject],
        reporter: SeverityReporter,
    ) -> None:
        names_by_id: dict[int, str] = {}
        ids_by_name: dict[str, int] = {}

        for obj in objects:
            if obj.id not in names_by_id:
                names_by_id[obj.id] = obj.name
            else:
                reporter.error(
                    FindingCode.ID_DUPLICATE,
                    f"Id duplicate '{obj.id}' found with objects with name "
                    f"'{obj.name}' and '{names_by_id[obj.id]}'",
                )

            if obj.name not in ids_by_name:
                ids_by_name[obj.name] = obj.id
            else:
                reporter.error(
                    FindingCode.NAME_DUPLICATE,
                    f"Name duplicate '{obj.name}' found with objects with Id "
                    f"'{obj.id}' and '{ids_by_name[obj.name]}'",
                )
