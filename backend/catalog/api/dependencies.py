"""Route Dependencies: hand the app-owned store and settings to handlers."""

from fastapi import Request

from catalog.config import Settings
from catalog.core.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    """FastAPI dependency for the process-wide product store."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
