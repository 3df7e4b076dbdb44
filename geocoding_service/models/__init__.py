"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines the geocode result record returned to callers.
"""
