# folklore_http_api/repositories/__init__.py
"""
Repository layer public exports.

Downstream code can import from this module instead of individual files, e.g.:

    from folklore_http_api.repositories import StoriesRepository
"""

from .filters import EqualityFilters, build_list_query, normalize_filter
from .languages import LanguagesRepository
from .proverbs import ProverbsRepository
from .stories import StoriesRepository

__all__ = [
    "EqualityFilters",
    "build_list_query",
    "normalize_filter",
    "LanguagesRepository",
    "ProverbsRepository",
    "StoriesRepository",
]
