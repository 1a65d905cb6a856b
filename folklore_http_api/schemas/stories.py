"""
folklore_http_api/schemas/stories.py

Pydantic models for the "stories" HTTP API.

Create payloads keep every field optional at the schema level: missing or
blank required fields are reported by the service layer as a 400 with a
field-specific message, and blank optional fields receive their defaults
there as well.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import APIModel


class StoryCreate(APIModel):
    """
    Payload for sharing a new story.
    """

    title: Optional[str] = Field(default=None, description="Story title (required).")
    content: Optional[str] = Field(default=None, description="Full story text (required).")
    author: Optional[str] = Field(default=None, description='Defaults to "Anonymous".')
    language: Optional[str] = Field(
        default=None,
        description='Language the story is told in. Defaults to "English".',
        examples=["Hindi", "Tamil", "Bengali"],
    )
    category: Optional[str] = Field(
        default=None,
        description='Defaults to "General".',
        examples=["Folk Tale", "Fable", "Legend"],
    )
    tags: Optional[str] = Field(default=None, description="Free-text tags.")


class StoryRead(APIModel):
    """
    A stored story, as returned by GET /api/stories.
    """

    id: int
    title: str
    content: str
    author: Optional[str] = None
    language: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[str] = None
    created_at: datetime


__all__ = ["StoryCreate", "StoryRead"]
