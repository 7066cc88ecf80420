"""Request Validator: checks payloads, query and path inputs before the store sees them.

Invariants:
    - Every failure raises a ProductValidationError subclass (never an early return)
    - Create requires all five fields; update requires none
    - Blank search terms and bad page/limit values never reach the store
    - A non-numeric product id parses to None (handled as not-found by routes)

Design Decisions:
    - Strict update validation is a setting: False reproduces the legacy
      "apply whatever was sent" behaviour for present fields
"""

from typing import Any, Iterable

from pydantic import ValidationError

from catalog.core.errors import (
    InvalidPaginationError, MissingQueryParameterError, ProductValidationError,
)
from catalog.schemas.product import FIELD_ALIASES, ProductCreate, ProductUpdate

CREATE_ERROR_MESSAGE = "All fields are required and inStock must be boolean"
UPDATE_ERROR_MESSAGE = "Invalid product fields"
DEFAULT_PAGE = 1


def validation_details(errors: Iterable[dict]) -> list[dict]:
    """Flatten Pydantic errors into field/message/type entries."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


def validate_create_payload(payload: Any) -> dict[str, Any]:
    """Validate a creation body. Returns Product field values keyed by attribute name."""
    if not isinstance(payload, dict):
        raise ProductValidationError(CREATE_ERROR_MESSAGE)
    try:
        body = ProductCreate.model_validate(payload)
    except ValidationError as e:
        raise ProductValidationError(
            CREATE_ERROR_MESSAGE, details=validation_details(e.errors()),
        ) from e
    return body.model_dump()


def validate_update_payload(payload: Any, strict: bool = True) -> dict[str, Any]:
    """Validate an update body. Returns only the fields that were supplied."""
    if not isinstance(payload, dict):
        raise ProductValidationError(UPDATE_ERROR_MESSAGE)
    if not strict:
        return {
            FIELD_ALIASES[key]: value
            for key, value in payload.items() if key in FIELD_ALIASES
        }
    try:
        body = ProductUpdate.model_validate(payload)
    except ValidationError as e:
        raise ProductValidationError(
            UPDATE_ERROR_MESSAGE, details=validation_details(e.errors()),
        ) from e
    return body.model_dump(exclude_unset=True)


def parse_pagination(
    page: str | None, limit: str | None, default_limit: int = 10,
) -> tuple[int, int] | None:
    """Parse page/limit query values. None when neither was supplied."""
    if page is None and limit is None:
        return None
    page_num = _parse_positive_int(page, DEFAULT_PAGE)
    limit_num = _parse_positive_int(limit, default_limit)
    if page_num is None or limit_num is None:
        raise InvalidPaginationError(page, limit)
    return page_num, limit_num


def require_search_term(q: str | None) -> str:
    """Return q unchanged if it has non-whitespace content."""
    if q is None or not q.strip():
        raise MissingQueryParameterError("q")
    return q


def parse_product_id(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_positive_int(raw: str | None, default: int) -> int | None:
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= 1 else None
