"""
Google Geocoding API client.

Every outcome, including transport failures and provider errors, is returned as
a GeocodeResult. The `cacheable` flag tells the caller whether the result may be
remembered (stable) or should be retried later (transient).
"""
import time
import logging

import requests

from geocoding_service.cache.store import cache_factory
from geocoding_service.config.settings import get_api_key, get_request_timeout
from geocoding_service.geocoding.base import normalize_address
from geocoding_service.geocoding.quota import QuotaGuard
from geocoding_service.models.geocode_result import GeocodeResult

# Constants
GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
CACHE_NAMESPACE = "GeocodingService"
OVER_LIMIT_MESSAGE = "Google geocoding service is over the daily limit. Please try again later."

# Positional layout of address_components: (field, component index, name form)
COMPONENT_FIELDS = (
    ("street_number", 0, "long_name"),
    ("street_name", 1, "long_name"),
    ("street_name_short", 1, "short_name"),
    ("suburb", 2, "long_name"),
    ("council", 3, "long_name"),
    ("council_short", 3, "short_name"),
    ("state", 4, "long_name"),
    ("state_short", 4, "short_name"),
    ("country", 5, "long_name"),
    ("country_short", 5, "short_name"),
    ("post_code", 6, "long_name"),
)

# Get logger
logger = logging.getLogger(__name__)


def _component_name(components, index, form):
    # Components are taken by position, not by type
    try:
        value = components[index].get(form)
    except (IndexError, KeyError, TypeError, AttributeError):
        return ""
    return "" if value is None else str(value)


class GoogleGeocoder:
    def __init__(self, api_key=None, cache=None, session=None, clock=time.time, timeout=None):
        self.api_key = api_key if api_key is not None else get_api_key()
        self.cache = cache if cache is not None else cache_factory(CACHE_NAMESPACE)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.quota = QuotaGuard(self.cache, clock)

    normalize_address = staticmethod(normalize_address)

    def is_over_limit(self):
        return self.quota.is_over_limit()

    def mark_limit(self):
        self.quota.mark_limit()

    def build_url(self, address):
        params = {"sensor": "false", "address": address, "key": self.api_key}
        return requests.Request("GET", GEOCODE_URL, params=params).prepare().url

    def _redact(self, url):
        if not self.api_key:
            return url
        return url.replace(self.api_key, "***")

    def _fetch(self, url):
        """Return the decoded payload, or None when nothing usable came back."""
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Network error calling {self._redact(url)}: {e}")
            return None

        if not response.content:
            logger.warning(f"Empty response ({response.status_code}) from {self._redact(url)}")
            return None
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Undecodable response ({response.status_code}) from {self._redact(url)}: {e}")
            return None

        if not isinstance(payload, dict) or "status" not in payload:
            logger.warning(f"Unexpected payload from {self._redact(url)}: {payload!r}")
            return None
        return payload

    def geocode(self, address):
        # Don't attempt geocoding if over limit
        if self.is_over_limit():
            logger.warning("Skipping geocode request: daily limit in effect")
            return GeocodeResult.failure("OVER_QUERY_LIMIT", OVER_LIMIT_MESSAGE, cacheable=False)

        address = self.normalize_address(address)
        url = self.build_url(address)

        payload = self._fetch(url)
        if payload is None:
            return GeocodeResult.failure(
                "UNKNOWN_ERROR", f"Could not call google api at url {url}", cacheable=False
            )

        status = str(payload["status"])
        if status != "OK":
            cacheable = True  # Errors such as ZERO_RESULTS are reproducible
            if status == "OVER_QUERY_LIMIT":
                cacheable = False
                self.mark_limit()
            logger.warning(f"Google error code {status} for address '{address}'")
            return GeocodeResult.failure(
                status, f"Google error code: {status} at url {url}", cacheable=cacheable
            )

        try:
            result = payload["results"][0]
            location = result["geometry"]["location"]
            latitude = float(location["lat"])
            longitude = float(location["lng"])
        except (LookupError, TypeError, ValueError) as e:
            logger.warning(f"Malformed OK response for address '{address}': {e}")
            return GeocodeResult.failure(
                "UNKNOWN_ERROR", f"Could not read google api response at url {url}", cacheable=False
            )

        components = result.get("address_components") or []
        fields = {name: _component_name(components, index, form) for name, index, form in COMPONENT_FIELDS}
        logger.info(f"Successfully geocoded '{address}' to ({latitude}, {longitude})")
        return GeocodeResult(success=True, latitude=latitude, longitude=longitude, cacheable=True, **fields)
