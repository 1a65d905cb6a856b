# folklore_http_api/logging/config.py

"""
Structured logging setup for the Folklore Commons HTTP API.

Call ``configure_logging`` once at process startup (``create_app`` does it).
Development gets colored console output; production gets one JSON object per
line.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from folklore_http_api.config import Settings, get_settings

from . import DEFAULT_LOGGER_NAME, get_logger


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant,
    falling back to INFO when the value is empty or unknown.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> structlog.typing.FilteringBoundLogger:
    """
    Configure structlog and standard-library logging, then return the
    service logger.
    """
    settings = settings or get_settings()
    level = _parse_level(settings.LOG_LEVEL)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Uvicorn and SQLAlchemy log through the standard library.
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stdout,
        level=level,
    )

    return get_logger(DEFAULT_LOGGER_NAME)


__all__ = ["configure_logging"]
