# folklore_http_api/schemas/__init__.py

"""
Pydantic schemas for the Folklore Commons HTTP API.

    from folklore_http_api.schemas import StoryCreate, StoryRead
"""

from .common import APIModel, ErrorDetail, ErrorResponse, MessageResponse
from .proverbs import ProverbCreate, ProverbRead
from .stories import StoryCreate, StoryRead

__all__ = [
    "APIModel",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    "ProverbCreate",
    "ProverbRead",
    "StoryCreate",
    "StoryRead",
]
