"""
folklore_http_api/schemas/proverbs.py

Pydantic models for the "proverbs" HTTP API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import APIModel


class ProverbCreate(APIModel):
    proverb: Optional[str] = Field(default=None, description="Proverb text (required).")
    meaning: Optional[str] = Field(default=None, description="Explanation or translation.")
    language: Optional[str] = Field(default=None, description='Defaults to "English".')
    region: Optional[str] = Field(
        default=None,
        description='Region the proverb comes from. Defaults to "Unknown".',
        examples=["Chennai", "Punjab", "Kerala"],
    )
    contributor: Optional[str] = Field(default=None, description='Defaults to "Anonymous".')


class ProverbRead(APIModel):
    id: int
    proverb: str
    meaning: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    contributor: Optional[str] = None
    created_at: datetime


__all__ = ["ProverbCreate", "ProverbRead"]
