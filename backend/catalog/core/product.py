"""Product: the catalog record entity.

Invariants:
    - id is assigned by the store and never changes afterwards
    - A stored Product always has all five data fields populated
"""

from dataclasses import dataclass, asdict, replace
from typing import Any, NewType

ProductId = NewType("ProductId", int)

# Data fields a caller may set; id is store-owned.
PRODUCT_FIELDS = ("name", "description", "price", "category", "in_stock")


@dataclass
class Product:
    """Catalog item: pure dataclass, no IO."""

    id: ProductId
    name: str
    description: str
    price: int | float
    category: str
    in_stock: bool

    def copy(self) -> "Product":
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
