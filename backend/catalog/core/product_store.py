"""Product Store: in-memory owner of the product collection.

Invariants:
    - All ids are unique; new id = max(existing ids) + 1, or 1 when empty
    - Insertion order is preserved and is the listing order
    - Reads return copies; callers never hold references into the store
    - Mutations (insert/update/remove) are serialized by a lock
    - Absence is returned as None; translating it to 404 is the caller's job

Design Decisions:
    - Read paths (filter, paginate, search) are composable over one snapshot,
      so a category filter can feed pagination
    - One instance per application (app.state.store); tests build their own
"""

import threading
from typing import Any, Iterable, Mapping

from catalog.core.pagination import Page, paginate
from catalog.core.product import PRODUCT_FIELDS, Product, ProductId


class ProductStore:
    """Mutable, process-local product collection."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: list[Product] = []
        self._lock = threading.RLock()
        for product in products:
            if self._index_of(product.id) is not None:
                raise ValueError(f"Duplicate product id: {product.id}")
            self._products.append(product.copy())

    def __len__(self) -> int:
        return len(self._products)

    # ─── Reads ──────────────────────────────────────────────────

    def list_all(self) -> list[Product]:
        """All products in insertion order."""
        with self._lock:
            return [p.copy() for p in self._products]

    def filter_by_category(self, category: str | None) -> list[Product]:
        """Case-insensitive exact category match. Empty/None means no filter."""
        products = self.list_all()
        if not category:
            return products
        wanted = category.lower()
        return [p for p in products if p.category.lower() == wanted]

    def paginate(
        self, page: int, limit: int, category: str | None = None,
    ) -> Page[Product]:
        """Page over the (optionally category-filtered) listing."""
        return paginate(self.filter_by_category(category), page, limit)

    def search(self, term: str) -> list[Product]:
        """Case-insensitive substring match on name only."""
        needle = term.lower()
        return [p for p in self.list_all() if needle in p.name.lower()]

    def stats_by_category(self) -> dict[str, int]:
        """Product counts keyed by lower-cased category."""
        stats: dict[str, int] = {}
        for product in self.list_all():
            key = product.category.lower()
            stats[key] = stats.get(key, 0) + 1
        return stats

    def find_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            return None if index is None else self._products[index].copy()

    # ─── Mutations ──────────────────────────────────────────────

    def insert(self, fields: Mapping[str, Any]) -> Product:
        """Assign the next id, append, return the new record."""
        with self._lock:
            product = Product(
                id=self._next_id(),
                **{name: fields[name] for name in PRODUCT_FIELDS},
            )
            self._products.append(product)
            return product.copy()

    def update(
        self, product_id: int, changes: Mapping[str, Any],
    ) -> Product | None:
        """Overwrite only the fields present in changes. id is never changed."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            product = self._products[index]
            for name in PRODUCT_FIELDS:
                if name in changes:
                    setattr(product, name, changes[name])
            return product.copy()

    def remove(self, product_id: int) -> Product | None:
        """Remove and return the record, or None if absent."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._products.pop(index)

    def seed(self, records: Iterable[Mapping[str, Any]]) -> list[Product]:
        """Bulk insert; ids follow the same assignment rule as insert()."""
        with self._lock:
            return [self.insert(record) for record in records]

    # ─── Helpers ────────────────────────────────────────────────

    def _next_id(self) -> ProductId:
        if not self._products:
            return ProductId(1)
        return ProductId(max(p.id for p in self._products) + 1)

    def _index_of(self, product_id: int) -> int | None:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
