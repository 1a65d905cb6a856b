# folklore_http_api/db/models.py

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timestamp stored as UTC and always read back timezone-aware.

    SQLite keeps no offset, so naive values coming out of the database are
    tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_AUTHOR = "Anonymous"
DEFAULT_CONTRIBUTOR = "Anonymous"
DEFAULT_LANGUAGE = "English"
DEFAULT_CATEGORY = "General"
DEFAULT_REGION = "Unknown"


# ---------------------------------------------------------------------------
# Stories
# ---------------------------------------------------------------------------


class Story(Base):
    """
    A folk story shared by a visitor.

    Rows are append-only: there is no update or delete path, and
    `created_at` is written once by the insert.
    """

    __tablename__ = "stories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False, default=DEFAULT_AUTHOR)
    language: Mapped[str] = mapped_column(
        String(64), nullable=False, default=DEFAULT_LANGUAGE, index=True
    )
    category: Mapped[str] = mapped_column(
        String(64), nullable=False, default=DEFAULT_CATEGORY, index=True
    )
    tags: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Story id={self.id!r} title={self.title!r} language={self.language!r}>"


# ---------------------------------------------------------------------------
# Proverbs
# ---------------------------------------------------------------------------


class Proverb(Base):
    """
    A proverb with its meaning and the region it comes from.
    """

    __tablename__ = "proverbs"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    proverb: Mapped[str] = mapped_column(Text, nullable=False)
    meaning: Mapped[str] = mapped_column(Text, nullable=False, default="")
    language: Mapped[str] = mapped_column(
        String(64), nullable=False, default=DEFAULT_LANGUAGE, index=True
    )
    region: Mapped[str] = mapped_column(
        String(128), nullable=False, default=DEFAULT_REGION, index=True
    )
    contributor: Mapped[str] = mapped_column(
        String(255), nullable=False, default=DEFAULT_CONTRIBUTOR
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Proverb id={self.id!r} language={self.language!r} region={self.region!r}>"
