# folklore_http_api/services/fields.py

"""
Validation and defaulting for create payloads.

This is the only place where blank values are rejected or replaced with
defaults; the frontend sends fields exactly as typed.
"""

from __future__ import annotations

from typing import Optional

from .errors import ValidationError


def clean_text(value: Optional[str]) -> str:
    """Strip surrounding whitespace; ``None`` becomes ``""``."""
    return (value or "").strip()


def require_text(value: Optional[str], *, field: str, message: str) -> str:
    text = clean_text(value)
    if not text:
        raise ValidationError(field, message)
    return text


def text_or_default(value: Optional[str], default: str) -> str:
    return clean_text(value) or default


__all__ = ["clean_text", "require_text", "text_or_default"]
