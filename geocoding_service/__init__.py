"""
Geocoding Service
-----------------
Translates postal addresses into coordinates and address components using the
Google Geocoding API, guarded by a daily quota flag kept in a key-value cache.
"""
