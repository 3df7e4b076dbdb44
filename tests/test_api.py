"""Tests for the FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from geocoding_service.api.app import app, get_geocoder
from geocoding_service.models.geocode_result import GeocodeResult

from conftest import make_response


@pytest.fixture
def client(geocoder):
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_read_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_geocode_single_address(client, session):
    r = client.get("/geocode", params={"address": "12 Collins St, Melbourne"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["cacheable"] is True
    assert body["latitude"] == -37.8
    assert body["stateShort"] == "VIC"
    assert "errorCode" not in body
    assert "address=12+Collins+St%2C+Melbourne" in session.get.call_args[0][0]


def test_geocode_components(client, session):
    r = client.get("/geocode", params=[("address", "12 Main St"), ("address", "Springfield")])
    assert r.status_code == 200
    assert "address=12+Main+St%2C+Springfield" in session.get.call_args[0][0]


def test_geocode_failure_is_reported_in_body(client, session):
    session.get.return_value = make_response({"status": "ZERO_RESULTS"})
    r = client.get("/geocode", params={"address": "Nowhere"})
    assert r.status_code == 200
    assert r.json()["errorCode"] == "ZERO_RESULTS"
    assert r.json()["cacheable"] is True


def test_geocode_requires_address(client):
    assert client.get("/geocode").status_code == 422


def test_geocode_rejects_blank_address(client, session):
    assert client.get("/geocode", params={"address": "  "}).status_code == 422
    assert session.get.call_count == 0


def test_over_limit(client, geocoder):
    assert client.get("/over-limit").json() == {"over_limit": False}
    geocoder.mark_limit()
    assert client.get("/over-limit").json() == {"over_limit": True}


class StaticGeocoder:
    """Minimal Geocoder that always reports the daily limit."""

    def is_over_limit(self):
        return True

    def geocode(self, address):
        return GeocodeResult.failure("OVER_QUERY_LIMIT", "limit", cacheable=False)


def test_any_geocoder_can_be_plugged_in():
    app.dependency_overrides[get_geocoder] = StaticGeocoder
    try:
        c = TestClient(app)
        assert c.get("/over-limit").json() == {"over_limit": True}
        assert c.get("/geocode", params={"address": "x"}).json()["errorCode"] == "OVER_QUERY_LIMIT"
    finally:
        app.dependency_overrides.clear()
