"""Product Write Routes: create, partial update, delete.

Invariants:
    - POST returns 201 with id = max(id) + 1 (1 on empty store)
    - Any missing field or non-bool inStock is 400 and the store is unchanged
    - PUT applies only supplied fields; strict mode type-checks them
    - PUT/DELETE on a missing id are 404 and the store is unchanged
    - DELETE returns {"message": "Product deleted", "product": {...}}
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.config import Settings
from catalog.main import create_app

CREATE_ERROR = "All fields are required and inStock must be boolean"


# ─── Create ─────────────────────────────────────────────────────

async def test_create_on_empty_store_assigns_id_one(client, store, make_product):
    res = await client.post("/api/products", json=make_product())
    assert res.status_code == 201
    assert res.json() == {
        "id": 1, "name": "Laptop", "description": "High-performance laptop",
        "price": 1200, "category": "Electronics", "inStock": True,
    }
    assert len(store) == 1


async def test_create_assigns_max_id_plus_one(client, seeded_store, make_product):
    seeded_store.remove(2)
    res = await client.post("/api/products", json=make_product(name="Next"))
    assert res.status_code == 201
    assert res.json()["id"] == 6
    assert len(seeded_store) == 5


async def test_created_product_is_retrievable(client, make_product):
    created = (await client.post(
        "/api/products", json=make_product(price=19.99, inStock=False),
    )).json()
    res = await client.get(f"/api/products/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_create_ignores_client_supplied_id(client, make_product):
    res = await client.post("/api/products", json=make_product(id=500))
    assert res.json()["id"] == 1


@pytest.mark.parametrize("field", ["name", "description", "price", "category", "inStock"])
async def test_create_missing_field_is_400(client, store, make_product, field):
    payload = make_product()
    del payload[field]
    res = await client.post("/api/products", json=payload)
    assert res.status_code == 400
    assert res.json()["message"] == CREATE_ERROR
    assert len(store) == 0


@pytest.mark.parametrize("overrides", [
    {"inStock": "true"},
    {"inStock": 1},
    {"inStock": None},
    {"name": ""},
    {"description": ""},
    {"category": ""},
    {"price": 0},
    {"price": "12.50"},
    {"price": True},
    {"name": 123},
])
async def test_create_with_invalid_field_is_400(client, store, make_product, overrides):
    res = await client.post("/api/products", json=make_product(**overrides))
    assert res.status_code == 400
    assert res.json()["message"] == CREATE_ERROR
    assert res.json()["details"]
    assert len(store) == 0


async def test_create_accepts_negative_price(client, store, make_product):
    res = await client.post("/api/products", json=make_product(price=-5))
    assert res.status_code == 201
    assert res.json()["price"] == -5
    assert store.find_by_id(1).price == -5


async def test_create_keeps_integer_price_integral(client, store, make_product):
    res = await client.post("/api/products", json=make_product(price=1200))
    assert '"price":1200,' in res.text
    assert type(store.find_by_id(1).price) is int


async def test_create_accepts_false_in_stock(client, make_product):
    res = await client.post("/api/products", json=make_product(inStock=False))
    assert res.status_code == 201
    assert res.json()["inStock"] is False


async def test_create_with_non_object_body_is_400(client, store):
    res = await client.post("/api/products", json=["not", "an", "object"])
    assert res.status_code == 400
    assert res.json() == {"message": CREATE_ERROR}
    assert len(store) == 0


async def test_create_without_body_is_400(client, store):
    res = await client.post("/api/products")
    assert res.status_code == 400
    assert len(store) == 0


async def test_create_with_malformed_json_is_400(client, store):
    res = await client.post(
        "/api/products", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data"
    assert len(store) == 0


# ─── Update ─────────────────────────────────────────────────────

async def test_update_accepts_negative_integer_price(client, seeded_store):
    res = await client.put("/api/products/3", json={"price": -30})
    assert res.status_code == 200
    assert '"price":-30,' in res.text
    assert type(seeded_store.find_by_id(3).price) is int


async def test_update_price_only(client, seeded_store):
    before = (await client.get("/api/products/4")).json()
    res = await client.put("/api/products/4", json={"price": 9.99})
    assert res.status_code == 200
    assert res.json() == {**before, "price": 9.99}
    assert seeded_store.find_by_id(4).price == 9.99


async def test_update_several_fields(client, seeded_store):
    res = await client.put(
        "/api/products/2", json={"name": "Bravo II", "inStock": True},
    )
    body = res.json()
    assert body["name"] == "Bravo II"
    assert body["inStock"] is True
    assert body["description"] == "B"


async def test_update_with_empty_body_changes_nothing(client, seeded_store):
    before = (await client.get("/api/products/1")).json()
    res = await client.put("/api/products/1", json={})
    assert res.status_code == 200
    assert res.json() == before


async def test_update_cannot_change_id(client, seeded_store):
    res = await client.put("/api/products/1", json={"id": 77, "name": "x"})
    assert res.json()["id"] == 1
    assert seeded_store.find_by_id(77) is None


@pytest.mark.parametrize("product_id", ["99", "abc"])
async def test_update_missing_id_is_404(client, seeded_store, product_id):
    res = await client.put(f"/api/products/{product_id}", json={"price": 1})
    assert res.status_code == 404
    assert res.json() == {"message": "Product not found"}
    assert len(seeded_store) == 5


@pytest.mark.parametrize("payload", [
    {"inStock": "no"},
    {"price": "cheap"},
    {"price": 0},
    {"name": ""},
    {"name": None},
])
async def test_strict_update_rejects_bad_types(client, seeded_store, payload):
    before = seeded_store.find_by_id(1)
    res = await client.put("/api/products/1", json=payload)
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid product fields"
    assert seeded_store.find_by_id(1) == before


async def test_legacy_update_applies_values_as_is(store, seeded_store):
    settings = Settings(
        _env_file=None, auth_token="test-token", seed_catalog=False,
        strict_update_validation=False,
    )
    app = create_app(settings=settings, store=store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        headers={"Authorization": "Bearer test-token"},
    ) as c:
        res = await c.put("/api/products/1", json={"inStock": "no", "color": "red"})
    assert res.status_code == 200
    assert res.json()["inStock"] == "no"
    assert "color" not in res.json()
    assert store.find_by_id(1).in_stock == "no"


# ─── Delete ─────────────────────────────────────────────────────

async def test_delete_returns_removed_product(client, seeded_store):
    res = await client.delete("/api/products/3")
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Product deleted"
    assert body["product"]["id"] == 3
    assert body["product"]["name"] == "Charlie"
    assert len(seeded_store) == 4


async def test_deleted_product_is_gone(client, seeded_store):
    await client.delete("/api/products/3")
    res = await client.get("/api/products/3")
    assert res.status_code == 404


@pytest.mark.parametrize("product_id", ["99", "abc"])
async def test_delete_missing_id_is_404_and_store_unchanged(client, seeded_store, product_id):
    res = await client.delete(f"/api/products/{product_id}")
    assert res.status_code == 404
    assert res.json() == {"message": "Product not found"}
    assert len(seeded_store) == 5
