"""
Pydantic schema definitions for API payloads.

Each domain (users, products) defines its own models for request and
response bodies.  Schemas are kept apart from the stores so that the
stores stay generic over plain dictionaries.
"""
