"""Shared pytest fixtures and utilities for all tests."""

import json
from unittest.mock import Mock

import pytest

from geocoding_service.cache.store import MemoryCache
from geocoding_service.geocoding.google import CACHE_NAMESPACE, GoogleGeocoder

START_TIME = 1_700_000_000.0


class FakeClock:
    """Controllable replacement for time.time."""

    def __init__(self, now=START_TIME):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_response(payload=None, status_code=200, body=None):
    """Build a stand-in for requests.Response from a JSON payload or raw body."""
    if body is None:
        body = json.dumps(payload) if payload is not None else ""
    response = Mock()
    response.status_code = status_code
    response.content = body.encode("utf-8")
    response.text = body
    if body:
        response.json.side_effect = lambda: json.loads(body)
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    return response


def ok_payload(lat=-37.8, lng=144.9, components=None):
    if components is None:
        components = [
            {"long_name": "12", "short_name": "12"},
            {"long_name": "Collins Street", "short_name": "Collins St"},
            {"long_name": "Melbourne", "short_name": "Melbourne"},
            {"long_name": "City of Melbourne", "short_name": "Melbourne"},
            {"long_name": "Victoria", "short_name": "VIC"},
            {"long_name": "Australia", "short_name": "AU"},
            {"long_name": "3000", "short_name": "3000"},
        ]
    return {
        "status": "OK",
        "results": [
            {
                "address_components": components,
                "geometry": {"location": {"lat": lat, "lng": lng}},
            }
        ],
    }


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return MemoryCache(CACHE_NAMESPACE, clock=clock)


@pytest.fixture
def session():
    session = Mock()
    session.get.return_value = make_response(ok_payload())
    return session


@pytest.fixture
def geocoder(cache, session, clock):
    return GoogleGeocoder(api_key="test-key", cache=cache, session=session, clock=clock, timeout=5)
