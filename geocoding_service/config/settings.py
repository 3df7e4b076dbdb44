import os
import logging

# Get logger
logger = logging.getLogger(__name__)

# Defaults
DEFAULT_DB_URL = "sqlite:///./geocoding_cache.db"
DEFAULT_REQUEST_TIMEOUT = 10
DEFAULT_CACHE_LIFETIME = 3600 * 24

DATABASE_URL = os.getenv("DB_URL", DEFAULT_DB_URL)


def _read_number(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}. Using default {default}")
        return default


def get_api_key():
    """Return the Google Maps geocoding API key from the site configuration."""
    return os.getenv("GOOGLE_MAPS_GEOCODE_API_KEY", "")


def get_request_timeout():
    return _read_number("GEOCODE_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)


def get_cache_lifetime():
    return int(_read_number("CACHE_DEFAULT_LIFETIME", DEFAULT_CACHE_LIFETIME))
