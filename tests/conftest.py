# tests/conftest.py
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from folklore_http_api.config import AppEnv, Settings
from folklore_http_api.db.session import build_engine, build_session_factory, init_db
from folklore_http_api.main import create_app


@pytest.fixture(scope="function")
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file for each test."""
    return Settings(
        APP_ENV=AppEnv.TESTING,
        DATABASE_URL=f"sqlite:///{tmp_path / 'data' / 'folklore.db'}",
        LOG_LEVEL="WARNING",
        LOG_FORMAT="console",
    )


@pytest.fixture(scope="function")
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app: FastAPI) -> Iterator[TestClient]:
    """
    TestClient used as a context manager so the lifespan runs and the
    tables exist before the first request.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db(app: FastAPI, client: TestClient) -> Iterator[Session]:
    """A session on the same database the client talks to."""
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def session(settings: Settings) -> Iterator[Session]:
    """A session on a freshly initialized database, without any HTTP app."""
    engine = build_engine(settings)
    init_db(engine)
    factory = build_session_factory(engine)
    db_session = factory()
    try:
        yield db_session
    finally:
        db_session.close()
        engine.dispose()
