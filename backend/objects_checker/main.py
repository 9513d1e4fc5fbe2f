"""Objects Checker API.

FastAPI application exposing the catalog validation engine over HTTP.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from objects_checker import __version__
from objects_checker.api.router import api_router
from objects_checker.config import get_settings
from objects_checker.log import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()
    logger.info("app_starting", debug=settings.DEBUG)

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="Objects Checker",
    description="Validates objects catalogs for duplicate ids and names, id gaps and naming conventions.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "Objects Checker",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def run() -> None:
    """Serve the API with uvicorn using HOST/PORT settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
