"""
Database Module
-------------
Handles database connections and the ORM model backing the key-value cache.
Uses SQLAlchemy so the cache can live in SQLite locally or PostgreSQL in deployment.
"""
