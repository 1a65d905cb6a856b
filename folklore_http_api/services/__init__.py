"""
folklore_http_api.services
--------------------------

Service layer aggregation for the Folklore Commons HTTP API.

Routers should import service classes from this package instead of depending
directly on repositories.

Example:

    from folklore_http_api.services import StoriesService, ValidationError
"""

from .errors import FolkloreError, StorageError, ValidationError
from .languages_service import REFERENCE_LANGUAGES, LanguagesService
from .proverbs_service import ProverbsService
from .stories_service import StoriesService

__all__ = [
    "FolkloreError",
    "StorageError",
    "ValidationError",
    "REFERENCE_LANGUAGES",
    "LanguagesService",
    "ProverbsService",
    "StoriesService",
]
