"""
User store.

The demo users are the ones the first version of the server shipped with;
they are only loaded when ``seed_demo_data`` is enabled.
"""

from typing import Any, Dict, List

from crud_api.app.services.resource_store import ResourceStore

DEMO_USERS: List[Dict[str, Any]] = [
    {"name": "John Doe"},
    {"name": "Jane Doe"},
    {"name": "Jim Doe"},
    {"name": "Jill Doe"},
]


class UserStore(ResourceStore):
    """In-memory store of users."""

    entity_name = "User"

    def seed(self) -> None:
        for payload in DEMO_USERS:
            self.create(payload)
