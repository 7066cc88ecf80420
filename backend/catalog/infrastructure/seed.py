"""Seed Catalog: sample products loaded into the store at startup.

Invariants:
    - Seed records go through ProductStore.seed(), so ids follow the normal rule
    - seed=False yields an empty store
"""

import logging

from catalog.core.product_store import ProductStore

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = (
    {
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "in_stock": False,
    },
)


def build_store(seed: bool = True) -> ProductStore:
    """Create the process-wide store, optionally pre-seeded."""
    store = ProductStore()
    if seed:
        store.seed(SAMPLE_PRODUCTS)
        logger.info(f"Seeded catalog with {len(store)} products")
    return store
