"""
folklore_http_api
-----------------

HTTP API layer for Folklore Commons, a small site for sharing folk stories
and proverbs across Indian languages.

This package exposes:

- ``create_app()``: application factory returning a FastAPI instance,
  suitable for ``uvicorn --factory folklore_http_api:create_app``.
"""

from importlib import metadata as _metadata

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

try:
    __version__: str = _metadata.version("folklore-commons")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


# ---------------------------------------------------------------------------
# Public application entry point
# ---------------------------------------------------------------------------

from .main import create_app  # noqa: E402

__all__ = [
    "__version__",
    "create_app",
]
