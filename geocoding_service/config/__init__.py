"""
Configuration Module
------------------
Reads service settings (API key, database URL, timeouts) from environment variables.
"""
