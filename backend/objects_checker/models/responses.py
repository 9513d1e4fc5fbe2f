"""API response models."""

from typing import Literal

from pydantic import BaseModel

from objects_checker import __version__


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = __version__
    uptime_seconds: float
