# tests/__init__.py
"""
Test suite for Folklore Commons.

Organization:
- `core`: query builder and service-layer rules, against a throwaway SQLite database.
- `http_api`: end-to-end API tests through FastAPI's TestClient.
"""
