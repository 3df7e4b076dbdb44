"""
Geocoding Module
--------------
Handles forward geocoding of postal addresses to coordinates and address components.
Uses the Google Geocoding API, guarded by a daily quota flag stored in the cache.
"""
