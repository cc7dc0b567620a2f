# tests/test_error_responder.py
from fastapi.testclient import TestClient
from product_api import main
from product_api.config import get_settings
from product_api.main import app

client = TestClient(app)
AUTH = {"x-api-key": get_settings().API_KEY}

def test_unknown_route_echoes_method_and_path():
    r = client.get("/api/widgets")
    assert r.status_code == 404
    assert r.json() == {
        "error": "Not Found",
        "message": "Route GET /api/widgets not found",
        "statusCode": 404,
    }

def test_unknown_route_keeps_query_string():
    r = client.post("/nowhere?x=1")
    assert r.status_code == 404
    assert r.json()["message"] == "Route POST /nowhere?x=1 not found"

def test_unsupported_method_on_known_path_is_not_found():
    r = client.patch("/api/products/1", json={})
    assert r.status_code == 404
    assert r.json()["message"] == "Route PATCH /api/products/1 not found"

def test_invalid_json_body():
    r = client.post(
        "/api/products",
        content="{not json",
        headers={**AUTH, "content-type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {
        "error": "Invalid JSON",
        "message": "Request body contains invalid JSON",
        "statusCode": 400,
    }

def test_invalid_json_wins_over_missing_api_key():
    r = client.post(
        "/api/products",
        content="{oops",
        headers={"content-type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid JSON"

def test_undecodable_body_is_invalid_json():
    r = client.put(
        "/api/products/1",
        content=b"\xff\xfe{",
        headers={**AUTH, "content-type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid JSON"

def test_array_body_fails_every_rule():
    r = client.post("/api/products", json=[1, 2], headers=AUTH)
    assert r.status_code == 400
    assert r.json()["error"] == "ValidationError"
    assert len(r.json()["message"].split(", ")) == 5

def test_empty_body_fails_every_rule():
    r = client.post("/api/products", headers=AUTH)
    assert r.status_code == 400
    assert r.json()["message"].startswith("Name is required")
    assert r.json()["message"].endswith("inStock is required and must be a boolean")

def test_unexpected_error_is_hidden_from_client(monkeypatch):
    async def boom():
        raise RuntimeError("database password is hunter2")

    monkeypatch.setattr(main, "product_stats_logic", boom)
    quiet_client = TestClient(app, raise_server_exceptions=False)
    r = quiet_client.get("/api/products/stats")
    assert r.status_code == 500
    assert r.json() == {
        "error": "Internal Server Error",
        "message": "Something went wrong on the server",
        "statusCode": 500,
    }
    assert "hunter2" not in r.text
