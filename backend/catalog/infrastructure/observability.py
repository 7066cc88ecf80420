"""Catalog Logging: request-aware formatters and one-shot root logger setup.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Request middleware fields (method, path, status_code, duration_ms) are grouped
      under a single "request" object in JSON and a "-> status (ms)" suffix in text
    - Catalog fields (product_id, error_code) are surfaced only when set
    - setup_logging replaces the handler it installed earlier instead of stacking

Design Decisions:
    - stdlib logging only; the middleware and error handlers pass context via `extra`
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# LogRecord attribute -> key inside the "request" object
REQUEST_FIELDS = {
    "method": "method",
    "path": "path",
    "status_code": "status",
    "duration_ms": "durationMs",
}
CATALOG_FIELDS = ("product_id", "error_code")

_installed_handler: logging.Handler | None = None


def request_context(record: logging.LogRecord) -> dict[str, Any]:
    """Request fields attached by the middleware, keyed for output."""
    return {
        key: record.__dict__[attr]
        for attr, key in REQUEST_FIELDS.items()
        if record.__dict__.get(attr) is not None
    }


def catalog_context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        attr: record.__dict__[attr]
        for attr in CATALOG_FIELDS
        if record.__dict__.get(attr) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, request context nested under "request"."""

    def format(self, record: logging.LogRecord) -> str:
        log: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request = request_context(record)
        if request:
            log["request"] = request
        log.update(catalog_context(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line: `GET /api/products -> 200 (1.3ms) product_id=4`."""

    def __init__(self):
        super().__init__("[%(asctime)s] %(levelname)s %(name)s: %(message)s")

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        request = request_context(record)
        if "status" in request:
            line += f" -> {request['status']}"
        if "durationMs" in request:
            line += f" ({request['durationMs']}ms)"
        for attr, value in catalog_context(record).items():
            line += f" {attr}={value}"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the catalog handler on the root logger. Returns the handler."""
    global _installed_handler
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler
