"""
Command line entrypoint for the geocoding service.

Usage:
    python main.py "12 Main St, Springfield" "1 Collins St, Melbourne VIC"

Each address is geocoded in turn. The API key is read from GOOGLE_MAPS_GEOCODE_API_KEY
and the quota flag is kept in the database named by DB_URL.
"""
import sys
import logging

from geocoding_service.db.database import create_tables
from geocoding_service.geocoding.google import GoogleGeocoder

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)


def main(addresses):
    """
    Geocode each address and print the outcome. Returns the process exit code.
    """
    if not addresses:
        print(__doc__)
        return 1
    try:
        create_tables()
        geocoder = GoogleGeocoder()

        failures = 0
        for address in addresses:
            result = geocoder.geocode(address)
            if result.success:
                print(f"{address}\n  ({result.latitude}, {result.longitude}) "
                      f"{result.street_number} {result.street_name}, {result.suburb} "
                      f"{result.state_short} {result.post_code} {result.country_short}")
            else:
                failures += 1
                print(f"{address}\n  {result.error_code}: {result.error_message} (cacheable={result.cacheable})")

        return 0 if failures == 0 else 1
    except Exception as e:
        print(f"An error occurred in the main function: {str(e)}")
        return 1


if __name__ == "__main__":
    exit_code = main(sys.argv[1:])
    sys.exit(exit_code)
