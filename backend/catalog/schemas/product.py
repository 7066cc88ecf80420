"""Product Schemas: Pydantic models and JSON shaping for the product endpoints.

Invariants:
    - ProductCreate: name/description/category non-empty strings, price a
      finite non-zero int or float (never bool, any sign, int stays int),
      inStock strictly bool
    - ProductUpdate: same field rules, every field optional, explicit null rejected
    - Unknown keys are ignored; id can never be set by a caller

Design Decisions:
    - strict=True so "true"/1 never pass as inStock and "9.99" never passes as price
    - Serialization is a plain function, not a response_model: legacy update mode
      may store values that a typed response model would reject
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from catalog.core.pagination import Page
from catalog.core.product import Product

# JSON key -> Product attribute
FIELD_ALIASES = {
    "name": "name",
    "description": "description",
    "price": "price",
    "category": "category",
    "inStock": "in_stock",
}


def _check_price(v: int | float) -> int | float:
    if v == 0:
        raise ValueError("price is required")
    if isinstance(v, float) and not math.isfinite(v):
        raise ValueError("price must be finite")
    return v


class ProductCreate(BaseModel):
    """Product creation: all five fields required."""
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: int | float
    category: str = Field(min_length=1)
    in_stock: bool = Field(alias="inStock")

    @field_validator("price")
    @classmethod
    def price_is_nonzero_finite(cls, v: int | float) -> int | float:
        return _check_price(v)


class ProductUpdate(BaseModel):
    """Partial product update: only supplied fields are applied."""
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    name: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    price: int | float | None = None
    category: str | None = Field(None, min_length=1)
    in_stock: bool | None = Field(None, alias="inStock")

    @field_validator("price")
    @classmethod
    def price_is_nonzero_finite(cls, v: int | float | None) -> int | float | None:
        return v if v is None else _check_price(v)

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self


def serialize_product(product: Product) -> dict[str, Any]:
    """Product -> JSON object with camelCase inStock."""
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "category": product.category,
        "inStock": product.in_stock,
    }


def serialize_page(page: Page[Product]) -> dict[str, Any]:
    """Page -> pagination envelope."""
    return {
        "page": page.page,
        "limit": page.limit,
        "totalItems": page.total_items,
        "totalPages": page.total_pages,
        "data": [serialize_product(p) for p in page.data],
    }
