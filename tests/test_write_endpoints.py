# tests/test_write_endpoints.py
import pytest
from fastapi.testclient import TestClient
from product_api.config import get_settings
from product_api.database import PRODUCTS
from product_api.main import app

client = TestClient(app)
AUTH = {"x-api-key": get_settings().API_KEY}

def _kettle(**overrides):
    body = {
        "name": "  Kettle  ",
        "description": " Electric kettle ",
        "price": 35,
        "category": "  Kitchen ",
        "inStock": True,
    }
    body.update(overrides)
    return body

def test_create_requires_api_key():
    r = client.post("/api/products", json=_kettle())
    assert r.status_code == 401
    assert r.json() == {
        "error": "AuthenticationError",
        "message": "Invalid or missing API key",
        "statusCode": 401,
    }
    assert len(PRODUCTS) == 3

def test_create_with_wrong_api_key():
    r = client.post("/api/products", json=_kettle(), headers={"x-api-key": "guess"})
    assert r.status_code == 401
    assert len(PRODUCTS) == 3

def test_auth_runs_before_field_validation():
    r = client.post("/api/products", json={})
    assert r.status_code == 401
    assert len(PRODUCTS) == 3

def test_create_with_price_too_large_for_a_float():
    r = client.post("/api/products", json=_kettle(price=10 ** 400), headers=AUTH)
    assert r.status_code == 400
    assert r.json()["message"] == "Price is required and must be a non-negative number"
    assert len(PRODUCTS) == 3

def test_stats_with_prices_whose_sum_overflows():
    for _ in range(2):
        r = client.post("/api/products", json=_kettle(price=1.7e308), headers=AUTH)
        assert r.status_code == 201
    r = client.get("/api/products/stats")
    assert r.status_code == 200
    body = r.json()
    assert body["totalProducts"] == 5
    assert body["priceRange"] == {"min": 50, "max": 1.7e308}
    assert body["averagePrice"] == pytest.approx((1200 + 800 + 50 + 2 * 1.7e308) / 5)

def test_create_missing_price():
    body = _kettle()
    del body["price"]
    r = client.post("/api/products", json=body, headers=AUTH)
    assert r.status_code == 400
    assert r.json()["error"] == "ValidationError"
    assert r.json()["message"] == "Price is required and must be a non-negative number"
    assert len(PRODUCTS) == 3

def test_create_reports_every_violation():
    r = client.post("/api/products", json={"name": "Kettle", "price": -1}, headers=AUTH)
    assert r.status_code == 400
    assert r.json()["message"] == ", ".join([
        "Description is required and must be a non-empty string",
        "Price is required and must be a non-negative number",
        "Category is required and must be a non-empty string",
        "inStock is required and must be a boolean",
    ])

def test_create_then_get_returns_sanitized_record():
    r = client.post("/api/products", json=_kettle(id="client-chosen"), headers=AUTH)
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Product created successfully"
    created = body["product"]
    assert created["id"] != "client-chosen"
    assert created["name"] == "Kettle"
    assert created["description"] == "Electric kettle"
    assert created["category"] == "kitchen"
    assert created["price"] == 35
    assert created["inStock"] is True
    assert len(PRODUCTS) == 4

    fetched = client.get(f"/api/products/{created['id']}").json()
    assert fetched == created

def test_create_update_get_round_trip_keeps_id_and_position():
    created = client.post("/api/products", json=_kettle(), headers=AUTH).json()["product"]
    r = client.put(f"/api/products/{created['id']}", json=_kettle(price=29.5), headers=AUTH)
    assert r.status_code == 200
    assert r.json()["message"] == "Product updated successfully"
    assert r.json()["product"]["id"] == created["id"]

    fetched = client.get(f"/api/products/{created['id']}").json()
    assert fetched["price"] == 29.5
    ids = [p["id"] for p in client.get("/api/products").json()["products"]]
    assert ids == ["1", "2", "3", created["id"]]

def test_update_replaces_in_place():
    r = client.put("/api/products/1", json=_kettle(inStock=False), headers=AUTH)
    assert r.status_code == 200
    products = client.get("/api/products").json()["products"]
    assert products[0]["id"] == "1"
    assert products[0]["name"] == "Kettle"
    assert products[0]["inStock"] is False

def test_update_unknown_product():
    r = client.put("/api/products/missing", json=_kettle(), headers=AUTH)
    assert r.status_code == 404
    assert r.json()["message"] == "Product with ID missing not found"

def test_update_validates_before_lookup():
    r = client.put("/api/products/missing", json={}, headers=AUTH)
    assert r.status_code == 400

def test_update_requires_api_key():
    r = client.put("/api/products/1", json=_kettle())
    assert r.status_code == 401
    assert client.get("/api/products/1").json()["name"] == "Laptop"

def test_delete_product():
    r = client.delete("/api/products/2", headers=AUTH)
    assert r.status_code == 200
    assert r.json()["message"] == "Product deleted successfully"
    assert r.json()["product"]["name"] == "Smartphone"
    assert [p["id"] for p in client.get("/api/products").json()["products"]] == ["1", "3"]

def test_delete_unknown_product():
    r = client.delete("/api/products/missing", headers=AUTH)
    assert r.status_code == 404
    assert len(PRODUCTS) == 3

def test_delete_requires_api_key():
    r = client.delete("/api/products/1")
    assert r.status_code == 401
    assert len(PRODUCTS) == 3

def test_stats_on_empty_store():
    for pid in ("1", "2", "3"):
        assert client.delete(f"/api/products/{pid}", headers=AUTH).status_code == 200
    r = client.get("/api/products/stats")
    assert r.json() == {
        "totalProducts": 0,
        "inStockCount": 0,
        "outOfStockCount": 0,
        "categoryCounts": {},
        "averagePrice": 0,
        "priceRange": {"min": 0, "max": 0},
    }
