"""
In-memory users and products REST API.

``crud_api.app`` holds the FastAPI application; ``crud_api.client``
is a small ``requests``-based client for it.
"""

__version__ = "1.0.0"
