"""
Pydantic models for user data.

Users only have a handful of well-known fields, but the API keeps the
payload open: field values are not type-checked and extra keys sent by
the client are stored and returned unchanged.  An ``id`` key in a
create or update body is accepted and ignored by the store.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from crud_api.app.schemas.common import RecordRead


class UserBase(BaseModel):
    name: Optional[Any] = Field(None, examples=["John Doe"])
    email: Optional[Any] = Field(None, examples=["john@example.com"])

    model_config = ConfigDict(extra="allow")


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(UserBase):
    """Schema for updating a user.

    All fields are optional; only keys present in the request body are
    merged into the stored record.
    """


class UserRead(RecordRead):
    """Schema for reading a user from the API."""

    name: Optional[Any] = Field(None, examples=["John Doe"])
    email: Optional[Any] = Field(None, examples=["john@example.com"])
