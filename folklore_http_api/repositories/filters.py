# folklore_http_api/repositories/filters.py

"""
Filtered, newest-first read queries for the list endpoints.

Every list endpoint accepts up to two optional equality filters (e.g.
``language`` and ``category`` for stories). This module normalizes the raw
query-string values and turns the ones that survive into a parameterized
SQLAlchemy ``Select``.

Normalization rules:
- ``None``, ``""`` and whitespace-only values mean "no filter".
- Other values are stripped and then matched exactly (case-sensitive).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type

from sqlalchemy import Select, select

from ..db.models import Base


def normalize_filter(value: Optional[str]) -> Optional[str]:
    """
    Return the stripped filter value, or None when it should be ignored.
    """
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class EqualityFilters:
    """
    The present (column, value) pairs of a list request, in request order.
    """

    items: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_values(cls, **values: Optional[str]) -> "EqualityFilters":
        items = []
        for column, raw in values.items():
            value = normalize_filter(raw)
            if value is not None:
                items.append((column, value))
        return cls(items=tuple(items))

    @property
    def combination(self) -> str:
        """
        Short label of which filters are present, e.g. "none",
        "language" or "language+region".
        """
        if not self.items:
            return "none"
        return "+".join(column for column, _ in self.items)

    def as_dict(self) -> Dict[str, str]:
        return dict(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


def build_list_query(model: Type[Base], filters: EqualityFilters) -> Select[Any]:
    """
    Build ``SELECT * FROM <model> [WHERE col = :v AND ...]`` ordered by
    creation time, newest first. Rows created in the same instant come back
    in reverse insertion order.
    """
    columns = model.__table__.columns
    stmt = select(model)

    for column, value in filters.items:
        if column not in columns:
            raise ValueError(f"{model.__name__} has no column {column!r} to filter on.")
        stmt = stmt.where(columns[column] == value)

    return stmt.order_by(columns["created_at"].desc(), columns["id"].desc())


__all__ = ["EqualityFilters", "build_list_query", "normalize_filter"]
