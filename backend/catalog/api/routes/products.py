"""Product Routes: CRUD, listing, search and category stats over the ProductStore.

Invariants:
    - Every handler: extract inputs → validate → store operation → JSON
    - Domain failures are raised, never turned into responses here
    - /search and /stats are registered before /{product_id} so they are reachable
    - GET /api/products is one handler; query parameters select the mode:
      none → full list, category → filtered list, page/limit → pagination
      envelope, category + page/limit → filter then paginate
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from catalog.api.dependencies import get_app_settings, get_product_store
from catalog.api.request_validator import (
    parse_pagination, parse_product_id, require_search_term,
    validate_create_payload, validate_update_payload,
)
from catalog.config import Settings
from catalog.core.errors import ProductNotFoundError
from catalog.core.product_store import ProductStore
from catalog.schemas.product import serialize_page, serialize_product

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(
    category: str | None = Query(None),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    store: ProductStore = Depends(get_product_store),
    settings: Settings = Depends(get_app_settings),
):
    """List products, optionally filtered by category and/or paginated."""
    pagination = parse_pagination(page, limit, settings.default_page_limit)
    if pagination is None:
        return [serialize_product(p) for p in store.filter_by_category(category)]
    page_num, limit_num = pagination
    return serialize_page(store.paginate(page_num, limit_num, category=category))


@router.get("/search")
async def search_products(
    q: str | None = Query(None),
    store: ProductStore = Depends(get_product_store),
):
    """Case-insensitive name search."""
    term = require_search_term(q)
    return [serialize_product(p) for p in store.search(term)]


@router.get("/stats")
async def product_stats(store: ProductStore = Depends(get_product_store)):
    """Product counts per lower-cased category."""
    return store.stats_by_category()


@router.get("/{product_id}")
async def get_product(
    product_id: str, store: ProductStore = Depends(get_product_store),
):
    parsed = parse_product_id(product_id)
    product = store.find_by_id(parsed) if parsed is not None else None
    if product is None:
        raise ProductNotFoundError(product_id)
    return serialize_product(product)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: Any = Body(None),
    store: ProductStore = Depends(get_product_store),
):
    """Create a product; the store assigns its id."""
    fields = validate_create_payload(payload)
    product = store.insert(fields)
    logger.info("Product created", extra={"product_id": product.id})
    return serialize_product(product)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    payload: Any = Body(None),
    store: ProductStore = Depends(get_product_store),
    settings: Settings = Depends(get_app_settings),
):
    """Apply a partial update; absent fields keep their values."""
    parsed = parse_product_id(product_id)
    if parsed is None or store.find_by_id(parsed) is None:
        raise ProductNotFoundError(product_id)
    changes = validate_update_payload(
        payload, strict=settings.strict_update_validation,
    )
    product = store.update(parsed, changes)
    if product is None:
        raise ProductNotFoundError(product_id)
    logger.info(
        f"Product updated ({', '.join(sorted(changes)) or 'no fields'})",
        extra={"product_id": product.id},
    )
    return serialize_product(product)


@router.delete("/{product_id}")
async def delete_product(
    product_id: str, store: ProductStore = Depends(get_product_store),
):
    parsed = parse_product_id(product_id)
    product = store.remove(parsed) if parsed is not None else None
    if product is None:
        raise ProductNotFoundError(product_id)
    logger.info("Product deleted", extra={"product_id": product.id})
    return {"message": "Product deleted", "product": serialize_product(product)}
