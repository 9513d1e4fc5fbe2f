"""Catalog endpoints — validate and list objects posted as JSON.

The request body has the same shape as an objects file: a list of classes,
each with a `class` name and its `objects`.
"""

import structlog
from fastapi import APIRouter, Query

from objects_checker.models.catalog import Catalog, ListedObject, ObjectClass, SortKey, list_objects
from objects_checker.validators import ValidationReport, validation_engine

logger = structlog.get_logger()

router = APIRouter()


@router.post("/validate", response_model=ValidationReport)
async def validate(classes: list[ObjectClass]):
    """Run every check over the posted catalog."""
    report = validation_engine.validate(Catalog(classes=classes))
    logger.info(
        "api_validate",
        errors=report.summary.error_count,
        warnings=report.summary.warning_count,
    )
    return report


@router.post("/objects", response_model=list[ListedObject])
async def objects(
    classes: list[ObjectClass],
    sort_by: SortKey = Query(default="id"),
    descending: bool = Query(default=False),
):
    """List the posted objects with their class names."""
    return list_objects(Catalog(classes=classes), sort_by=sort_by, descending=descending)
