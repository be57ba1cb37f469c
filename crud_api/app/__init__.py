"""
Application package initializer.

This package contains the FastAPI application and its submodules.
Each domain (users, products) has a store in ``services``, schemas in
``schemas`` and a router in ``api/endpoints``.
"""

from .main import app, create_app  # noqa: F401
