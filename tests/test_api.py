"""Tests for the HTTP boundary."""

import pytest
from fastapi.testclient import TestClient

from signal_scout.dependencies import get_scout_service
from signal_scout.exceptions import AdapterFailure
from signal_scout.main import app
from signal_scout.models import PlatformId

from conftest import FakeAdapter, failing


@pytest.fixture
def client_with(make_service):
    """Test client whose search service uses the given fake adapters."""

    def _client(adapters: dict) -> TestClient:
        service = make_service(adapters)
        app.dependency_overrides[get_scout_service] = lambda: service
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_health_endpoint():
    r = TestClient(app).get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_platforms_endpoint_lists_catalog_in_order():
    r = TestClient(app).get("/api/platforms")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == ["reddit", "hackernews", "devto"]
    assert all(p["label"] and p["highlight"] for p in r.json())


def test_search_returns_response_envelope(client_with, reddit_results):
    client = client_with({PlatformId.REDDIT: FakeAdapter(reddit_results)})
    r = client.post("/api/search", json={"query": "gen z budgeting", "platforms": ["reddit"]})

    assert r.status_code == 200
    assert r.headers["x-request-id"]
    body = r.json()
    assert [item["id"] for item in body["results"]] == ["reddit:a1", "reddit:a2"]
    assert body["results"][0]["metadata"] == {"upvotes": 850, "comments": 210}
    meta = body["meta"]
    assert meta["query"] == "gen z budgeting"
    assert meta["platforms"] == ["reddit"]
    assert meta["generatedAt"]
    assert meta["recommendedAngles"]
    assert meta["nextPrompts"]


def test_validation_error_is_client_error(client_with):
    client = client_with({PlatformId.REDDIT: FakeAdapter([])})
    r = client.post("/api/search", json={"query": "x", "platforms": []})

    assert r.status_code == 400
    assert "platform" in r.json()["error"].lower()


def test_invalid_json_is_client_error(client_with):
    client = client_with({PlatformId.REDDIT: FakeAdapter([])})
    r = client.post("/api/search", content=b"{not json", headers={"content-type": "application/json"})

    assert r.status_code == 400
    assert "error" in r.json()


def test_total_failure_is_server_error(client_with):
    client = client_with({PlatformId.REDDIT: failing(PlatformId.REDDIT, AdapterFailure.RATE_LIMITED)})
    r = client.post("/api/search", json={"query": "x", "platforms": ["reddit"]})

    assert r.status_code == 502
    body = r.json()
    assert "reddit" in body["error"]
    assert body["failures"] == [{"platform": "reddit", "cause": "rate_limited", "message": "boom"}]


def test_unregistered_platform_is_internal_error(client_with):
    client = client_with({PlatformId.REDDIT: FakeAdapter([])})
    r = client.post("/api/search", json={"query": "x", "platforms": ["devto"]})

    assert r.status_code == 500
    assert r.json() == {"error": "Internal error while scouting signals"}
