# folklore_http_api/db/session.py

from __future__ import annotations

from pathlib import Path
from typing import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from folklore_http_api.config import Settings

from .models import Base

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def build_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database. No connection
    is opened until the first query.
    """
    connect_args: dict[str, object] = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        # SQLite needs this flag when sessions are used from FastAPI's threadpool.
        connect_args = {"check_same_thread": False}

    return create_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


def init_db(engine: Engine) -> None:
    """
    Create the stories and proverbs tables if they do not exist yet.

    For file-backed SQLite the parent directory is created first, so a fresh
    checkout can start without any manual setup.
    """
    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------


def get_session(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a session from the factory attached to the
    application by ``create_app`` and closes it afterwards.

    Usage:

        from fastapi import Depends
        from folklore_http_api.db.session import get_session

        @router.get("/stories")
        def list_stories(session: Session = Depends(get_session)):
            ...
    """
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


__all__ = [
    "build_engine",
    "build_session_factory",
    "init_db",
    "get_session",
]
