"""Tests for the FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from visa_guide.api import app
from visa_guide.config import DEFAULT_RULES_ROOT, get_settings


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("VISA_RULES_ROOT", str(DEFAULT_RULES_ROOT))
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_countries_include_destinations(client):
    codes = {country["code"] for country in client.get("/countries").json()}
    assert {"FR", "JP", "TH", "US"} <= codes


def test_guide_returns_entry_and_matrix_rules(client):
    response = client.get(
        "/guide",
        params={"citizenship": "fr", "destination": "us", "transit": "us", "transitHours": 3},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["route_key"] == "FR->US"
    assert data["rule"]["visa_type"] == "eta"
    assert data["visa_matrix_rule"]["category"] == "eta"
    assert data["transit_rule"]["purpose"] == "transit"
    assert data["transit_hours"] == 3
    assert data["missing_data"] is False


def test_guide_flags_missing_data(client):
    data = client.get("/guide", params={"citizenship": "BR", "destination": "JP"}).json()
    assert data["rule"] is None
    assert data["missing_data"] is True


def test_guide_rejects_unknown_purpose(client):
    response = client.get("/guide", params={"citizenship": "FR", "destination": "US", "purpose": "study"})
    assert response.status_code == 400


def test_visa_matrix_rule_lookup(client):
    response = client.get("/visa-matrix/fr/us")
    assert response.status_code == 200
    assert response.json() == {"category": "visa_free", "max_stay_days": 90}


def test_visa_matrix_rule_not_found(client):
    assert client.get("/visa-matrix/fr/zz").status_code == 404
