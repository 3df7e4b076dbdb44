"""
API Module
---------
Provides RESTful API endpoints for the geocoding service using FastAPI.
Features include:
- Geocoding an address or a list of address components
- Reporting whether the daily quota blackout is in effect
"""
