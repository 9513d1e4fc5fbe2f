"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from objects_checker.api.catalog import router as catalog_router
from objects_checker.api.health import router as health_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Catalog validation and listing
api_router.include_router(catalog_router, tags=["Catalog"])
