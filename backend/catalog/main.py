"""Product Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Middleware order (outer → inner): request logging → auth gate → routes
    - Global error handlers map CatalogError → {"message": ...} JSON responses
    - The ProductStore is owned by the app (app.state.store) for the process lifetime

Design Decisions:
    - create_app() factory: tests build an app with their own Settings and store
    - Store is attached in create_app, not the lifespan, so ASGI test transports
      that skip lifespan events still get one
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from catalog.api.auth import register_auth_gate
from catalog.api.error_handlers import register_error_handlers
from catalog.api.request_logging import register_request_logging
from catalog.api.routes import products, root
from catalog.config import Settings, get_settings
from catalog.core.product_store import ProductStore
from catalog.infrastructure.observability import setup_logging
from catalog.infrastructure.seed import build_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: ProductStore | None = None,
) -> FastAPI:
    """Build the FastAPI application around a single ProductStore."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Product API started with {len(app.state.store)} products",
        )
        yield
        logger.info("Product API shutting down")

    app = FastAPI(
        title="Product Catalog API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = (
        store if store is not None else build_store(settings.seed_catalog)
    )

    # Routes: explicit registration; root first, products after
    app.include_router(root.router)
    app.include_router(products.router)

    register_auth_gate(app, settings.auth_token)
    register_request_logging(app)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
