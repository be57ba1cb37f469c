"""
Pydantic models for products.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from crud_api.app.schemas.common import RecordRead


class ProductBase(BaseModel):
    name: Optional[Any] = Field(None, examples=["Laptop"])
    price: Optional[Any] = Field(None, examples=[999.99])
    description: Optional[Any] = Field(None, examples=["A portable computer"])

    model_config = ConfigDict(extra="allow")


class ProductCreate(ProductBase):
    """Schema for creating a product."""


class ProductUpdate(ProductBase):
    """Schema for updating a product; only provided keys are merged."""


class ProductRead(RecordRead):
    """Schema for reading a product."""

    name: Optional[Any] = Field(None, examples=["Laptop"])
    price: Optional[Any] = Field(None, examples=[999.99])
    description: Optional[Any] = Field(None, examples=["A portable computer"])
