"""Pagination: pure slicing of an ordered sequence into a page envelope.

Invariants:
    - data is items[(page-1)*limit : (page-1)*limit + limit]
    - total_pages = ceil(total_items / limit); 0 when there are no items
    - A page past the end yields empty data, never an error
    - page < 1 or limit < 1 raises InvalidPaginationError
"""

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from catalog.core.errors import InvalidPaginationError

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """Pagination envelope."""

    page: int
    limit: int
    total_items: int
    total_pages: int
    data: list[T] = field(default_factory=list)


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    """Slice items into a Page. Pure, no IO."""
    if page < 1 or limit < 1:
        raise InvalidPaginationError(page, limit)
    start = (page - 1) * limit
    total_items = len(items)
    return Page(
        page=page,
        limit=limit,
        total_items=total_items,
        total_pages=math.ceil(total_items / limit),
        data=list(items[start:start + limit]),
    )
