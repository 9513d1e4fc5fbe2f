"""Objects file loader — reads a YAML catalog into the catalog model.

Loading either yields a complete Catalog or raises CatalogLoadError; a
catalog that cannot be loaded is never partially validated.
"""

from pathlib import Path
from typing import Any, Union

import structlog
import yaml
from pydantic import TypeAdapter, ValidationError

from objects_checker.models.catalog import Catalog, ObjectClass

logger = structlog.get_logger()

_classes_adapter = TypeAdapter(list[ObjectClass])


class CatalogLoadError(Exception):
    """The objects file could not be turned into a catalog."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


def parse_catalog(data: Any, source: str = "<data>") -> Catalog:
    """Build a catalog from an already-deserialized document.

    Args:
        data: List of class mappings, or None for an empty document
        source: Where the data came from, for error messages
    """
    if data is None:
        return Catalog()
    if not isinstance(data, list):
        raise CatalogLoadError(
            f"{source}: expected a list of classes, got {type(data).__name__}",
            source=source,
        )

    try:
        classes = _classes_adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogLoadError(f"{source}: invalid catalog structure: {e}", source=source) from e

    return Catalog(classes=classes)


def load_catalog_text(text: str, source: str = "<text>") -> Catalog:
    """Parse YAML text into a catalog."""
    try:
        # Scalars stay strings; pydantic converts ids and keeps names as text
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"{source}: cannot parse YAML: {e}", source=source) from e

    return parse_catalog(data, source=source)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Read and parse an objects file.

    Raises:
        CatalogLoadError: file missing or unreadable, bad YAML, or bad structure
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("catalog_read_failed", path=str(path), error=str(e))
        raise CatalogLoadError(f"Cannot read objects file '{path}': {e}", source=str(path)) from e

    try:
        catalog = load_catalog_text(text, source=str(path))
    except CatalogLoadError as e:
        logger.error("catalog_parse_failed", path=str(path), error=str(e))
        raise

    logger.info(
        "catalog_loaded",
        path=str(path),
        classes=catalog.class_count,
        objects=catalog.object_count,
    )
    return catalog
