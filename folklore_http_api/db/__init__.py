"""
folklore_http_api.db
====================

Database package for the Folklore Commons HTTP API.

Public DB primitives can be imported from a single place, e.g.:

    from folklore_http_api.db import Base, Story, Proverb, get_session
"""

from .models import Base, Proverb, Story
from .session import (
    build_engine,
    build_session_factory,
    get_session,
    init_db,
)

__all__ = [
    "Base",
    "Story",
    "Proverb",
    "build_engine",
    "build_session_factory",
    "get_session",
    "init_db",
]
