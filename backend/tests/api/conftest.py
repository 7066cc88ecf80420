"""API test fixtures: fresh app + store per test, httpx client over ASGI.

Invariants:
    - Every test gets its own ProductStore (no state shared between tests)
    - Settings are explicit (no .env, no seeding)
    - client sends a valid bearer token; anon_client sends none
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.config import Settings
from catalog.core.product_store import ProductStore
from catalog.main import create_app

TOKEN = "test-token"
AUTH_HEADERS = {"Authorization": f"Bearer {TOKEN}"}


def _product_payload(**overrides) -> dict:
    payload = {
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": 1200,
        "category": "Electronics",
        "inStock": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings():
    return Settings(
        _env_file=None, auth_token=TOKEN, seed_catalog=False,
        log_format="text",
    )


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        headers=AUTH_HEADERS,
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def seeded_store(store):
    """Five products A-E across two categories."""
    store.seed([
        {"name": "Alpha Pro", "description": "A", "price": 10,
         "category": "Books", "in_stock": True},
        {"name": "Bravo", "description": "B", "price": 20,
         "category": "books", "in_stock": False},
        {"name": "Charlie", "description": "C", "price": 30,
         "category": "Toys", "in_stock": True},
        {"name": "Delta", "description": "D", "price": 40,
         "category": "Electronics", "in_stock": True},
        {"name": "Echo Product", "description": "E", "price": 50,
         "category": "electronics", "in_stock": False},
    ])
    return store


@pytest.fixture
def make_product():
    """Factory for JSON creation payloads with sensible defaults."""
    return _product_payload
