# tests/http_api/test_proverbs.py

from typing import Any, Dict

from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from folklore_http_api.db.models import Proverb

API_PREFIX = "/api"


def _proverb(text: str, **extra: Any) -> Dict[str, Any]:
    payload = {"proverb": text}
    payload.update(extra)
    return payload


def test_create_proverb_applies_defaults(client: TestClient) -> None:
    response = client.post(f"{API_PREFIX}/proverbs", json=_proverb("Yatha raja tatha praja"))
    assert response.status_code == 200
    assert response.json() == {"message": "Proverb added successfully"}

    proverbs = client.get(f"{API_PREFIX}/proverbs").json()
    assert len(proverbs) == 1
    stored = proverbs[0]
    assert stored["proverb"] == "Yatha raja tatha praja"
    assert stored["meaning"] == ""
    assert stored["language"] == "English"
    assert stored["region"] == "Unknown"
    assert stored["contributor"] == "Anonymous"


def test_missing_proverb_text_is_rejected_without_writing(
    client: TestClient, db: Session
) -> None:
    for payload in ({}, {"proverb": ""}, {"proverb": "   ", "meaning": "nothing"}):
        response = client.post(f"{API_PREFIX}/proverbs", json=payload)
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["message"] == "Proverb text is required"
        assert error["details"] == {"field": "proverb"}

    db.expire_all()
    assert db.execute(select(func.count()).select_from(Proverb)).scalar_one() == 0


def test_list_filters_on_language_and_region_together(client: TestClient) -> None:
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("one", language="Tamil", region="Chennai"))
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("two", language="Tamil", region="Madurai"))
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("three", language="Hindi", region="Chennai"))
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("four", language="tamil", region="Chennai"))
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("five", language="Tamil", region="Chennai"))

    response = client.get(
        f"{API_PREFIX}/proverbs", params={"language": "Tamil", "region": "Chennai"}
    )
    assert response.status_code == 200
    matches = response.json()
    assert [p["proverb"] for p in matches] == ["five", "one"]
    assert all(p["language"] == "Tamil" and p["region"] == "Chennai" for p in matches)


def test_list_filters_on_region_only(client: TestClient) -> None:
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("one", language="Tamil", region="Chennai"))
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("two", language="Hindi", region="Chennai"))
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("three", language="Hindi", region="Delhi"))

    regional = client.get(f"{API_PREFIX}/proverbs", params={"region": "Chennai"}).json()
    assert [p["proverb"] for p in regional] == ["two", "one"]


def test_list_without_filters_is_newest_first(client: TestClient) -> None:
    for text in ("first", "second", "third"):
        client.post(f"{API_PREFIX}/proverbs", json=_proverb(text))

    listed = client.get(f"{API_PREFIX}/proverbs").json()
    assert [p["proverb"] for p in listed] == ["third", "second", "first"]


def test_unmatched_region_returns_empty_list(client: TestClient) -> None:
    client.post(f"{API_PREFIX}/proverbs", json=_proverb("one", region="Kerala"))

    response = client.get(f"{API_PREFIX}/proverbs", params={"region": "Goa"})
    assert response.status_code == 200
    assert response.json() == []
