"""Structured logging setup shared by the CLI and the API."""

import logging
import sys
from typing import Optional

import structlog

from objects_checker.config import get_settings


def configure_logging(level: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """Configure structlog once per process.

    Logs go to stderr so they never mix with report output on stdout.
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    debug = settings.DEBUG if debug is None else debug

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.WARNING)
        ),
        # Resolve stderr on every call; test runners swap it out
        logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
        cache_logger_on_first_use=False,
    )
