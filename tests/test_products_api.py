"""Product CRUD endpoints."""
from decimal import Decimal

import pytest

from inventory_api.models.models import Product

LAPTOP = {
    "name": "Laptop Dell XPS 13",
    "description": "13-inch ultrathin laptop",
    "quantity": 15,
    "price": "1299.99",
    "category": "Electronics",
}


def _create(client, headers, **overrides):
    resp = client.post("/products", json={**LAPTOP, **overrides}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["product"]


def test_create_product(client, auth_headers):
    resp = client.post("/products", json=LAPTOP, headers=auth_headers)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["message"] == "Product created successfully"
    product = body["product"]
    assert product["id"] > 0
    assert product["name"] == LAPTOP["name"]
    assert product["quantity"] == 15
    assert Decimal(product["price"]) == Decimal("1299.99")
    assert product["stock_status"] == "normal"
    assert product["created_at"]


def test_create_requires_auth(client):
    resp = client.post("/products", json=LAPTOP)
    assert resp.status_code == 401


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "X"},
        {"name": "N" * 101},
        {"quantity": -1},
        {"price": "-0.01"},
        {"category": "E"},
        {"description": "d" * 501},
    ],
)
def test_create_validation(client, auth_headers, overrides):
    resp = client.post("/products", json={**LAPTOP, **overrides}, headers=auth_headers)
    assert resp.status_code == 422


def test_get_product(client, auth_headers):
    created = _create(client, auth_headers)
    resp = client.get(f"/products/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["product"]["name"] == LAPTOP["name"]


def test_get_missing_product(client):
    resp = client.get("/products/9999")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "PRD001"
    assert resp.json()["error"]["message"] == "Product not found"


def test_get_non_numeric_id(client):
    assert client.get("/products/abc").status_code == 422


def test_list_products(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, name="Office Desk", category="Furniture")
    resp = client.get("/products")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 2
    assert [p["name"] for p in body["products"]] == ["Laptop Dell XPS 13", "Office Desk"]


def test_list_empty(client):
    assert client.get("/products").json() == {"products": [], "total": 0}


def test_search_matches_name_and_description_case_insensitively(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, name="Office Desk", description="Wooden desk", category="Furniture")
    _create(client, auth_headers, name="Desk Lamp", description="LED lamp", category="Lighting")

    by_name = client.get("/products", params={"search": "DESK"}).json()
    assert {p["name"] for p in by_name["products"]} == {"Office Desk", "Desk Lamp"}

    by_description = client.get("/products", params={"search": "ultrathin"}).json()
    assert [p["name"] for p in by_description["products"]] == ["Laptop Dell XPS 13"]


def test_filter_by_category(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, name="Office Desk", category="Furniture")
    body = client.get("/products", params={"category": "Furniture"}).json()
    assert body["total"] == 1
    assert body["products"][0]["category"] == "Furniture"


def test_search_takes_precedence_over_category(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers, name="Office Desk", description="Wooden desk", category="Furniture")
    body = client.get("/products", params={"search": "laptop", "category": "Furniture"}).json()
    assert [p["name"] for p in body["products"]] == ["Laptop Dell XPS 13"]


def test_update_product_replaces_fields(client, auth_headers):
    created = _create(client, auth_headers)
    update = {**LAPTOP, "name": "Laptop Dell XPS 15", "quantity": 3, "price": "1499.00", "description": ""}
    resp = client.put(f"/products/{created['id']}", json=update, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["message"] == "Product updated successfully"
    assert body["product"]["name"] == "Laptop Dell XPS 15"
    assert body["product"]["description"] == ""
    assert body["product"]["stock_status"] == "low"
    assert Decimal(body["product"]["price"]) == Decimal("1499.00")


def test_update_missing_product(client, auth_headers):
    resp = client.put("/products/9999", json=LAPTOP, headers=auth_headers)
    assert resp.status_code == 404


def test_update_requires_auth(client, auth_headers):
    created = _create(client, auth_headers)
    assert client.put(f"/products/{created['id']}", json=LAPTOP).status_code == 401


@pytest.mark.parametrize(
    "quantity,status",
    [(0, "out_of_stock"), (2, "critical"), (5, "low"), (6, "normal")],
)
def test_update_stock(client, auth_headers, quantity, status):
    created = _create(client, auth_headers)
    resp = client.put(f"/products/{created['id']}/stock", json={"quantity": quantity}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["message"] == "Stock updated successfully"
    assert body["product"]["quantity"] == quantity
    assert body["product"]["stock_status"] == status


def test_update_stock_rejects_negative(client, auth_headers):
    created = _create(client, auth_headers)
    resp = client.put(f"/products/{created['id']}/stock", json={"quantity": -1}, headers=auth_headers)
    assert resp.status_code == 422


def test_delete_is_soft_and_hides_product(client, auth_headers, db_session):
    created = _create(client, auth_headers)
    resp = client.delete(f"/products/{created['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Product deleted successfully"}

    assert client.get(f"/products/{created['id']}").status_code == 404
    assert client.get("/products").json()["total"] == 0
    assert client.delete(f"/products/{created['id']}", headers=auth_headers).status_code == 404

    row = db_session.get(Product, created["id"])
    assert row is not None
    assert row.deleted_at is not None


def test_delete_requires_auth(client, auth_headers):
    created = _create(client, auth_headers)
    assert client.delete(f"/products/{created['id']}").status_code == 401


def test_versioned_prefix(client, auth_headers):
    resp = client.post("/api/v1/products", json=LAPTOP, headers=auth_headers)
    assert resp.status_code == 201
    product_id = resp.json()["product"]["id"]
    assert client.get(f"/api/v1/products/{product_id}").status_code == 200
    assert client.get("/api/v1/products").json()["total"] == 1
