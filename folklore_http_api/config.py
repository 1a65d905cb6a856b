# folklore_http_api/config.py

"""
Configuration for the Folklore Commons HTTP API.

Settings are strictly typed and validated by pydantic-settings. Every field
can be overridden with an environment variable carrying the ``FOLKLORE_``
prefix, or through a local ``.env`` file.

Environment variables
=====================

- FOLKLORE_APP_ENV
    "development", "production" or "testing".
    Default: "development"

- FOLKLORE_PORT
    TCP port for the development server.
    Default: 3000

- FOLKLORE_DATABASE_URL
    SQLAlchemy URL of the stories/proverbs database.
    Default: "sqlite:///./data/folklore.db"

- FOLKLORE_CORS_ORIGINS
    Comma-separated list of allowed CORS origins. "*" allows all origins.
    Default: "*"

- FOLKLORE_LOG_LEVEL / FOLKLORE_LOG_FORMAT
    Root log level and renderer ("console" or "json").
    Default: "INFO" / "console"

Typical usage
=============

    from folklore_http_api.config import get_settings

    settings = get_settings()
    app = create_app(settings)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Configuration values for the HTTP API and its storage.
    """

    # --- Application Meta ---
    APP_NAME: str = "folklore-commons"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    ENABLE_DOCS: bool = True

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: str = "*"

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./data/folklore.db"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    model_config = SettingsConfigDict(
        env_prefix="FOLKLORE_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        """
        Parse CORS_ORIGINS into a list; "*" (or empty) means allow all.
        """
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]


# Singleton configuration instance
_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the process-wide Settings, building them from the environment on
    first use.
    """
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


__all__ = ["AppEnv", "Settings", "get_settings"]
