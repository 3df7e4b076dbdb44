"""
Cache Module
----------
Namespaced key-value stores with expiry. The geocoder keeps its daily quota
flag here; a SQLAlchemy-backed store is used in deployment and an in-memory
store in tests.
"""
