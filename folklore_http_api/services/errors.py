# folklore_http_api/services/errors.py

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError


class FolkloreError(Exception):
    """Base class for all service-level exceptions."""

    code = "error"
    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    @property
    def details(self) -> Optional[Dict[str, Any]]:
        return None


class ValidationError(FolkloreError):
    """Raised when a create request is missing a required field."""

    code = "validation_error"
    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    @property
    def details(self) -> Optional[Dict[str, Any]]:
        return {"field": self.field}


class StorageError(FolkloreError):
    """Raised when the database fails to read or write."""

    code = "storage_error"
    status_code = 500

    @classmethod
    def from_exc(cls, exc: SQLAlchemyError) -> "StorageError":
        # Prefer the DB-API message over SQLAlchemy's wrapper text.
        orig = getattr(exc, "orig", None)
        return cls(str(orig) if orig is not None else str(exc))


__all__ = ["FolkloreError", "ValidationError", "StorageError"]
