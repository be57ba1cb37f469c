"""
Product store.
"""

from crud_api.app.services.resource_store import ResourceStore


class ProductStore(ResourceStore):
    """In-memory store of products."""

    entity_name = "Product"
