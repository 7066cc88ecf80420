"""Error Hierarchy: typed, categorized exceptions for catalog failure modes.

Invariants:
    - Every error has a message, code (str), category, severity and http_status
    - Client errors (400-level) are domain failures; anything else is unclassified
    - to_response() carries only "message" (+ "details"); code stays in logs
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: one global handler maps all of them
    - Pagination/search parameter failures are ProductValidationError subclasses,
      so they travel the same path as payload validation
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class CatalogError(Exception):
    """Base exception for all classified catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the JSON error body returned to clients."""
        body: dict[str, Any] = {"message": self.message}
        if self.details:
            body["details"] = self.details
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class ProductValidationError(CatalogError):
    """Caller input is missing or malformed."""
    def __init__(
        self,
        message: str,
        details: list[dict[str, Any]] | None = None,
        code: str = "VALIDATION_ERROR",
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, details,
        )


class InvalidPaginationError(ProductValidationError):
    """page/limit did not parse to integers >= 1."""
    def __init__(self, page: Any = None, limit: Any = None):
        super().__init__(
            "Invalid pagination parameters", code="INVALID_PAGINATION",
        )
        self.page = page
        self.limit = limit


class MissingQueryParameterError(ProductValidationError):
    """A required query parameter is absent or blank."""
    def __init__(self, parameter: str):
        super().__init__(
            f'Query parameter "{parameter}" is required',
            code="MISSING_QUERY_PARAMETER",
        )
        self.parameter = parameter


class ProductNotFoundError(CatalogError):
    """Referenced product id is not in the store."""
    def __init__(self, product_id: Any = None):
        super().__init__(
            "Product not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.product_id = product_id
