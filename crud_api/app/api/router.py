"""
Top-level router for the resource collections.

This router aggregates the per-domain routers.  ``create_app`` mounts
it under ``settings.api_prefix``; the informational routes in
``endpoints.info`` are mounted separately at the root.
"""

from fastapi import APIRouter

from .endpoints import products, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
