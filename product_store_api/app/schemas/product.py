"""
Pydantic schemas for products.

``ProductDetails`` is the body accepted by ``POST /products``.  Its
fields are only typed here; the business rules (name format, allowed
types, inventory range, cost) are enforced by ``ProductStore`` so that
every rule maps to its own error message and a missing ``cost`` is a
validation failure rather than a parse error.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, confloat


ALLOWED_PRODUCT_TYPES = frozenset({"book", "food", "gadget", "other"})

MIN_INVENTORY = 1
MAX_INVENTORY = 9999

# NaN and infinities are refused while parsing, before any rule runs.
FiniteFloat = confloat(allow_inf_nan=False)


class ProductDetails(BaseModel):
    """Schema for creating a new product."""

    name: str = Field(..., description="Product name; no digits, not blank, not a boolean literal")
    type: str = Field(..., description="One of book, food, gadget or other")
    inventory: int = Field(..., description="Units in stock, between 1 and 9999")
    cost: Optional[FiniteFloat] = Field(None, description="Unit cost; required and non-negative")


class ProductId(BaseModel):
    """Identifier returned after a product is created."""

    id: int


class Product(BaseModel):
    """Schema for reading a stored product."""

    id: int
    name: str
    type: str
    inventory: int
    cost: FiniteFloat

    class Config:
        frozen = True


class ErrorResponseBody(BaseModel):
    """Body returned with every 400 response."""

    timestamp: datetime
    status: int
    error: str
    path: str
