"""Catalog models: classes and the objects they own.

Field aliases follow the objects file format, where a class name is stored
under the ``class`` key. No invariants are enforced here; enforcing them is
the job of the validators.
"""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CatalogObject(BaseModel):
    """One catalog entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(validation_alias=AliasChoices("id", "Id"))
    name: str = Field(default="", validation_alias=AliasChoices("name", "Name"))
    tags: str = Field(default="", validation_alias=AliasChoices("tags", "Tags"))

    @field_validator("name", "tags", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        # A bare `name:` in YAML loads as None
        return "" if value is None else value


class ObjectClass(BaseModel):
    """A named group of objects."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", validation_alias=AliasChoices("class", "Class", "name", "Name"))
    objects: list[CatalogObject] = Field(
        default_factory=list,
        validation_alias=AliasChoices("objects", "Objects"),
    )

    @field_validator("name", mode="before")
    @classmethod
    def _none_name_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("objects", mode="before")
    @classmethod
    def _none_objects_as_empty(cls, value):
        # A bare `objects:` loads as None, or as "" when scalars are kept as text
        return [] if value is None or value == "" else value


class Catalog(BaseModel):
    """Ordered sequence of object classes."""

    classes: list[ObjectClass] = Field(default_factory=list)

    def all_objects(self) -> list[CatalogObject]:
        """Flatten objects in class order, then within-class order."""
        objects: list[CatalogObject] = []
        for object_class in self.classes:
            objects.extend(object_class.objects)
        return objects

    @property
    def class_count(self) -> int:
        return len(self.classes)

    @property
    def object_count(self) -> int:
        return sum(len(c.objects) for c in self.classes)


SortKey = Literal["id", "name", "class"]


class ListedObject(BaseModel):
    """An object paired with the name of the class that owns it."""

    id: int
    name: str
    class_name: str
    tags: str = ""


def list_objects(catalog: Catalog, sort_by: str = "id", descending: bool = False) -> list[ListedObject]:
    """List every object with its class name, sorted for display.

    The sort is stable, so ties keep catalog order. Names sort case-insensitively.

    Raises:
        ValueError: if ``sort_by`` is not one of id, name, class
    """
    sort_keys = {
        "id": lambda row: row.id,
        "name": lambda row: row.name.casefold(),
        "class": lambda row: row.class_name.casefold(),
    }
    if sort_by not in sort_keys:
        raise ValueError(f"Cannot sort objects by '{sort_by}'; use one of: {', '.join(sort_keys)}")

    rows = [
        ListedObject(id=obj.id, name=obj.name, class_name=object_class.name, tags=obj.tags)
        for object_class in catalog.classes
        for obj in object_class.objects
    ]
    return sorted(rows, key=sort_keys[sort_by], reverse=descending)
