"""Catalog and API models."""

from objects_checker.models.catalog import Catalog, CatalogObject, ListedObject, ObjectClass, list_objects

__all__ = ["Catalog", "CatalogObject", "ListedObject", "ObjectClass", "list_objects"]
