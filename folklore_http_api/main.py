"""
Entry point for the Folklore Commons HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, mounts the JSON routers under ``/api`` and serves the static
frontend from the package's ``frontend/`` directory.

Intended usage:
    uvicorn --factory folklore_http_api.main:create_app --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from folklore_http_api import __version__
from folklore_http_api.config import AppEnv, Settings, get_settings
from folklore_http_api.db.session import build_engine, build_session_factory, init_db
from folklore_http_api.logging import get_logger
from folklore_http_api.logging.config import configure_logging
from folklore_http_api.routers import languages, proverbs, stories
from folklore_http_api.services.errors import FolkloreError

API_ROOT = "/api"
FRONTEND_DIR = Path(__file__).resolve().parent / "frontend"

logger = get_logger(__name__)


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Mapping[str, Any]] = None,
) -> JSONResponse:
    error: Dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = dict(details)
    return JSONResponse(status_code=status_code, content={"error": error})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    Each application owns its engine and session factory; request handlers
    receive sessions through ``folklore_http_api.db.session.get_session``.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db(engine)
        logger.info(
            "app_startup",
            env=settings.APP_ENV.value,
            version=__version__,
            database=engine.url.render_as_string(hide_password=True),
        )
        yield
        logger.info("app_shutdown")
        engine.dispose()

    docs_enabled = settings.ENABLE_DOCS and settings.APP_ENV != AppEnv.PRODUCTION

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Crowd-sourced folk stories and proverbs across Indian languages",
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global Exception Handlers
    @app.exception_handler(FolkloreError)
    async def folklore_error_handler(request: Request, exc: FolkloreError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("request_failed", path=request.url.path, code=exc.code, error=exc.message)
        else:
            logger.info("request_rejected", path=request.url.path, code=exc.code, error=exc.message)
        return _error_response(exc.status_code, exc.code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info("request_rejected", path=request.url.path, code="validation_error", error=message)
        return _error_response(status.HTTP_400_BAD_REQUEST, "validation_error", message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, "http_error", str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_exception", path=request.url.path)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            str(exc) if settings.DEBUG else "Internal Server Error",
        )

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    app.include_router(stories.router, prefix=API_ROOT)
    app.include_router(proverbs.router, prefix=API_ROOT)
    app.include_router(languages.router, prefix=API_ROOT)

    # Mounted last so it only sees paths no API route claimed.
    app.mount("/", StaticFiles(directory=FRONTEND_DIR, html=True), name="frontend")

    return app


def run() -> None:
    """
    Local development entry point (``folklore-commons`` console script).
    """
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "folklore_http_api.main:create_app",
        host=settings.HOST,
        port=settings.PORT,
        factory=True,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
