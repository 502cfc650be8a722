# storefront/domain/schemas.py
import uuid
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    """Schema for adding a product to the catalogue."""

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Unit price (>= 0)")
    stock: int = Field(0, ge=0, description="Units available (>= 0)")


class ProductOut(BaseModel):
    id: uuid.UUID
    name: str
    price: Decimal
    stock: int

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    """Current cart with the sum of its product prices."""

    cart_id: uuid.UUID
    products: List[ProductOut]
    total: Decimal


class OrderOut(BaseModel):
    id: uuid.UUID
    status: str
    products: List[ProductOut]
    total: Decimal
