"""Health check endpoint."""

import time

from fastapi import APIRouter

from objects_checker.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check. The service has no external dependencies."""
    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
