# folklore_http_api/logging/__init__.py

"""
Logging helpers for the Folklore Commons HTTP API.

API code obtains loggers from here instead of importing structlog directly:

    from folklore_http_api.logging import get_logger

    logger = get_logger(__name__)
    logger.info("story_created", language="Tamil")

Processors and renderers are configured once at startup by
``folklore_http_api.logging.config.configure_logging``.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog


DEFAULT_LOGGER_NAME = "folklore_http_api"


def get_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """
    Return a structlog bound logger.

    If ``name`` is omitted the service-level default name is used. Extra
    keyword arguments are bound as context on every event.
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME, **initial_values)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
