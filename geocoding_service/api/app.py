from fastapi import FastAPI, HTTPException, Depends, Query
from functools import lru_cache
import logging
from typing import List

from geocoding_service.db.database import create_tables
from geocoding_service.geocoding.base import Geocoder
from geocoding_service.geocoding.google import GoogleGeocoder

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Geocoding Service API",
    description="Address to coordinates lookup backed by the Google Geocoding API",
    version="1.0.0"
)


@lru_cache(maxsize=1)
def get_geocoder():
    create_tables()
    return GoogleGeocoder()


@app.get("/")
def read_root():
    return {"message": "Welcome to the Geocoding Service API"}

@app.get("/geocode")
def geocode_address(
    address: List[str] = Query(..., description="Address, or address components in order"),
    geocoder: Geocoder = Depends(get_geocoder)
):
    """
    Geocode an address. Repeat the `address` parameter to pass components,
    they are joined with ", " before the lookup.

    The response always contains `success` and `cacheable`; failures are
    reported in the body with `errorCode` and `errorMessage`, not as HTTP errors.
    """
    if not any(part.strip() for part in address):
        raise HTTPException(status_code=422, detail="Address must not be empty")

    query = address[0] if len(address) == 1 else address
    result = geocoder.geocode(query)
    if not result.success:
        logger.info(f"Geocode failed with {result.error_code} (cacheable={result.cacheable})")
    return result.to_dict()

@app.get("/over-limit")
def over_limit(geocoder: Geocoder = Depends(get_geocoder)):
    return {"over_limit": geocoder.is_over_limit()}
