"""
FastAPI dependencies shared by the endpoint modules.

Stores live on ``app.state`` and are created by ``create_app``, so
every application instance (and therefore every test) gets its own
empty collections.
"""

import re
from typing import Optional

from fastapi import Request

from crud_api.app.services.product_service import ProductStore
from crud_api.app.services.user_service import UserStore

_RECORD_ID = re.compile(r"-?\d+", re.ASCII)


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store


def parse_record_id(raw: str) -> Optional[int]:
    """Parse a path parameter into a record id.

    Only plain ASCII digits with an optional leading minus are accepted;
    anything else (whitespace, ``+``, underscores, other digit scripts)
    gives ``None``.  No record ever has ``None`` as its id, so the lookup
    that follows reports the record as not found instead of failing
    validation.
    """
    if not _RECORD_ID.fullmatch(raw):
        return None
    return int(raw)
