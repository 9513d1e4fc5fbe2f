"""Formatting Check — capitalization and whitespace conventions for names.

Severity policy is fixed per rule:

    Error:   nameless class/object, surrounding whitespace, object id below 1
    Warning: missing capital letter, whitespace inside a class name,
             object name words that start with neither a capital nor a digit
"""

from objects_checker.models.catalog import CatalogObject, ObjectClass
from objects_checker.validators.base import BaseCheck
from objects_checker.validators.models import FindingCode
from objects_checker.validators.reporter import SeverityReporter

MIN_OBJECT_ID = 1


class FormattingCheck(BaseCheck):
    """Validates class names and object names/ids."""

    @property
    def name(self) -> str:
        return "CheckForCorrectFormatting"

    def run(
        self,
        classes: list[ObjectClass],
        objects: list[CatalogObject],
        reporter: SeverityReporter,
    ) -> None:
        for object_class in classes:
            self._check_class(object_class, reporter)

        for obj in objects:
            self._check_object(obj, reporter)

    def _check_class(self, object_class: ObjectClass, reporter: SeverityReporter) -> None:
        name = object_class.name
        trimmed = name.strip()

        if len(name) < 1:
            reporter.error(FindingCode.CLASS_NAMELESS, "Nameless class found")
        elif not name[0].isspace() and not self._starts_upper(name):
            # Leading whitespace is the surrounding-whitespace error's business
            reporter.warning(
                FindingCode.CLASS_NOT_CAPITALIZED,
                f"Class with name '{name}' doesn't start with capital letter",
            )

        if trimmed != name:
            reporter.error(
                FindingCode.CLASS_SURROUNDING_WHITESPACE,
                f"Class with name '{trimmed}' contains leading or trailing whitespaces in it's name",
            )
        elif " " in name:
            reporter.warning(
                FindingCode.CLASS_EMBEDDED_WHITESPACE,
                f"Class with name '{name}' contains whitespaces in it's name",
            )

    def _check_object(self, obj: CatalogObject, reporter: SeverityReporter) -> None:
        name = obj.name
        trimmed = name.strip()

        if obj.id < MIN_OBJECT_ID:
            reporter.error(
                FindingCode.OBJECT_ID_BELOW_ONE,
                f"Object with name '{name}' contains Id below {MIN_OBJECT_ID}",
            )

        if len(name) < 1:
            reporter.error(FindingCode.OBJECT_NAMELESS, f"Object with Id '{obj.id}' is nameless")
        elif trimmed and not self._starts_upper(trimmed):
            reporter.warning(
                FindingCode.OBJECT_NOT_CAPITALIZED,
                f"Object with name '{name}' doesn't start with capital letter",
            )

        if trimmed != name:
            reporter.error(
                FindingCode.OBJECT_SURROUNDING_WHITESPACE,
                f"Object with name '{trimmed}' contains leading or trailing whitespaces in it's name",
            )

        if " " in trimmed:
            for word in trimmed.split(" "):
                # Consecutive spaces leave empty words behind
                if not word:
                    continue
                if not self._starts_numeric_or_upper(word):
                    reporter.warning(
                        FindingCode.OBJECT_WORD_NOT_CAPITALIZED,
                        f"Object with name '{name}' has parts in it's name that don't start with capital letter",
                    )
                    break
