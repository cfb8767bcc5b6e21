import pytest

API_KEY = {"X-API-Key": "test-key"}


@pytest.fixture
def speaker():
    return {"name": "Smart Speaker", "description": "Loud.", "price": 20.5, "category": "Audio"}


def test_list_products(client):
    resp = client.get("/products")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == ["B00123456"]


def test_list_products_filters(client):
    assert client.get("/products", params={"category": "electronics"}).json()[0]["id"] == "B00123456"
    assert client.get("/products", params={"category": "Books"}).json() == []
    assert len(client.get("/products", params={"search": "alexa"}).json()) == 1
    assert client.get("/products", params={"offset": 1}).json() == []
    assert client.get("/products", params={"limit": 0}).json() == []


def test_get_product_not_found(client):
    assert client.get("/products/missing").status_code == 404


def test_update_product(client, speaker):
    resp = client.put("/products/B00123456", json=speaker)
    assert resp.status_code == 200
    assert resp.json()["name"] == "Smart Speaker"
    assert resp.json()["id"] == "B00123456"
    assert client.put("/products/missing", json=speaker).status_code == 404


def test_delete_product(client):
    assert client.delete("/products/B00123456").status_code == 204
    assert client.get("/products/B00123456").status_code == 404


def test_orders_require_api_key(client):
    assert client.get("/orders").status_code == 401
    assert client.get("/orders", headers={"X-API-Key": "wrong"}).status_code == 401
    assert client.get("/orders", headers=API_KEY).status_code == 200


def test_create_order_computes_total(client):
    body = {"customerId": "CUST1", "products": [{"productId": "B00123456", "quantity": 3}]}
    resp = client.post("/orders", json=body, headers=API_KEY)
    assert resp.status_code == 201
    order = resp.json()
    assert order["totalAmount"] == 149.97
    assert order["status"] == "pending"
    assert client.get(f"/orders/{order['id']}", headers=API_KEY).status_code == 200


def test_create_order_with_unknown_product(client):
    body = {"customerId": "CUST1", "products": [{"productId": "nope", "quantity": 1}]}
    assert client.post("/orders", json=body, headers=API_KEY).status_code == 404


def test_create_order_needs_products(client):
    body = {"customerId": "CUST1", "products": []}
    assert client.post("/orders", json=body, headers=API_KEY).status_code == 422


def test_update_and_filter_orders(client):
    resp = client.put("/orders/ORDER123456", json={"status": "shipped"}, headers=API_KEY)
    assert resp.status_code == 200
    assert resp.json()["status"] == "shipped"
    assert len(client.get("/orders", params={"status": "shipped"}, headers=API_KEY).json()) == 1
    assert client.get("/orders", params={"status": "pending"}, headers=API_KEY).json() == []


def test_cancel_order(client):
    assert client.delete("/orders/ORDER123456", headers=API_KEY).status_code == 204
    assert client.get("/orders/ORDER123456", headers=API_KEY).status_code == 404
