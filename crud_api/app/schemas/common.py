"""
Response models shared by several routers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class RecordRead(BaseModel):
    """A stored record: the store-assigned ``id`` followed by its payload."""

    id: int

    model_config = ConfigDict(extra="allow")


class MessageResponse(BaseModel):
    """Body of ``404`` responses, e.g. ``{"message": "User not found"}``."""

    message: str


class ErrorResponse(BaseModel):
    """Body of ``500`` responses produced by the fault handler."""

    status: str = "error"
    message: str
    error: Optional[Any] = None


class WelcomeResponse(BaseModel):
    message: str
    endpoints: Dict[str, str]
