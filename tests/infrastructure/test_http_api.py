"""End-to-end tests of the HTTP API through Flask's test client."""

import pytest

from storefront.domain.model.product import Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.app import create_app
from tests.fakes import fake_repositories

USERS = [
    User("alice", "Alice Liddell", Role.CUSTOMER),
    User("bob", "Bob", Role.CUSTOMER),
    User("V", "Vera", Role.VENDOR),
    User("W", "Walt", Role.VENDOR),
    User("root", "Root", Role.ADMIN),
]


@pytest.fixture
def repos():
    return fake_repositories(
        products=[
            Product(id="A", name="Lamp", price=Money.of("10"), vendor_id="V", stock=5),
            Product(id="B", name="Desk", price=Money.of("20"), vendor_id="W", stock=1),
        ],
        users=USERS,
    )


@pytest.fixture
def client(repos, tmp_path):
    app = create_app(repos=repos, settings=Settings(data_dir=tmp_path))
    return app.test_client()


def _as(user_id: str) -> dict:
    return {"X-User-Id": user_id}


def _checkout(client, *items, user="alice", body=None):
    for product_id, qty in items:
        client.post("/api/cart", json={"productId": product_id, "quantity": qty}, headers=_as(user))
    return client.post("/api/orders", json=body or {}, headers=_as(user))


class TestAuthentication:

    def test_missing_identity(self, client):
        resp = client.get("/api/orders")
        assert resp.status_code == 401
        assert resp.get_json()["success"] is False

    def test_unknown_user(self, client):
        assert client.get("/api/orders", headers=_as("ghost")).status_code == 401


class TestPlaceOrder:

    def test_created(self, client, repos):
        resp = _checkout(client, ("A", 2), body={"shippingAddress": {"city": "Oxford"}})

        assert resp.status_code == 201
        order = resp.get_json()["data"]
        assert order["status"] == "pending"
        assert order["totalAmount"] == "20.00"
        assert order["paymentMethod"] == "cod"
        assert order["shippingAddress"]["fullName"] == "Alice Liddell"
        assert repos.products.stock_of("A") == 3
        assert client.get("/api/cart", headers=_as("alice")).get_json()["count"] == 0

    def test_empty_cart(self, client):
        resp = client.post("/api/orders", json={}, headers=_as("alice"))
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Cart is empty"

    def test_insufficient_stock_leaves_everything(self, client, repos):
        resp = _checkout(client, ("A", 2), ("B", 2))

        assert resp.status_code == 400
        assert "Available: 1" in resp.get_json()["message"]
        assert repos.products.stock_of("A") == 5
        assert client.get("/api/orders", headers=_as("alice")).get_json()["count"] == 0


class TestReadOrders:

    def test_list_newest_first(self, client):
        first = _checkout(client, ("A", 1)).get_json()["data"]["id"]
        second = _checkout(client, ("A", 1)).get_json()["data"]["id"]

        body = client.get("/api/orders", headers=_as("alice")).get_json()
        assert body["count"] == 2
        assert [o["id"] for o in body["data"]] == [second, first]

    @pytest.mark.parametrize("user, status", [("alice", 200), ("V", 200), ("root", 200), ("bob", 403), ("W", 403)])
    def test_show_permissions(self, client, user, status):
        order_id = _checkout(client, ("A", 1)).get_json()["data"]["id"]
        assert client.get(f"/api/orders/{order_id}", headers=_as(user)).status_code == status

    def test_show_missing(self, client):
        resp = client.get("/api/orders/404", headers=_as("root"))
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Order #404 not found"


class TestCancel:

    def test_owner_cancels_and_stock_returns(self, client, repos):
        order_id = _checkout(client, ("A", 2)).get_json()["data"]["id"]

        resp = client.patch(f"/api/orders/{order_id}/cancel", headers=_as("alice"))

        assert resp.status_code == 200
        assert resp.get_json()["data"]["status"] == "cancelled"
        assert repos.products.stock_of("A") == 5

        again = client.patch(f"/api/orders/{order_id}/cancel", headers=_as("alice"))
        assert again.status_code == 400
        assert repos.products.stock_of("A") == 5

    def test_non_owner_forbidden(self, client):
        order_id = _checkout(client, ("A", 2)).get_json()["data"]["id"]
        assert client.patch(f"/api/orders/{order_id}/cancel", headers=_as("root")).status_code == 403

    def test_shipped_not_cancellable(self, client, repos):
        order_id = _checkout(client, ("A", 2)).get_json()["data"]["id"]
        client.patch(f"/api/orders/{order_id}/status", json={"status": "shipped"}, headers=_as("V"))

        resp = client.patch(f"/api/orders/{order_id}/cancel", headers=_as("alice"))

        assert resp.status_code == 400
        assert "shipped" in resp.get_json()["message"]
        assert repos.products.stock_of("A") == 3


class TestStatusUpdate:

    def test_vendor_updates(self, client):
        order_id = _checkout(client, ("A", 1)).get_json()["data"]["id"]
        resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "confirmed"}, headers=_as("V"))
        assert resp.status_code == 200
        assert resp.get_json()["data"]["status"] == "confirmed"

    def test_invalid_status(self, client):
        order_id = _checkout(client, ("A", 1)).get_json()["data"]["id"]
        resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "lost"}, headers=_as("root"))
        assert resp.status_code == 400

    @pytest.mark.parametrize("user", ["alice", "W"])
    def test_forbidden(self, client, user):
        order_id = _checkout(client, ("A", 1)).get_json()["data"]["id"]
        resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "shipped"}, headers=_as(user))
        assert resp.status_code == 403


class TestVendorOrders:

    def test_projection(self, client):
        _checkout(client, ("A", 2), ("B", 1))

        body = client.get("/api/orders/vendor/mine", headers=_as("V")).get_json()

        assert body["count"] == 1
        (order,) = body["data"]
        assert [i["product"] for i in order["items"]] == ["A"]
        assert order["vendorSubtotal"] == "20.00"

    def test_customers_forbidden(self, client):
        assert client.get("/api/orders/vendor/mine", headers=_as("alice")).status_code == 403


class TestCart:

    def test_add_merges(self, client):
        client.post("/api/cart", json={"productId": "A", "quantity": 1}, headers=_as("alice"))
        body = client.post("/api/cart", json={"productId": "A", "quantity": 2}, headers=_as("alice")).get_json()
        assert body["count"] == 1
        assert body["data"][0]["quantity"] == 3

    def test_add_requires_product_id(self, client):
        assert client.post("/api/cart", json={}, headers=_as("alice")).status_code == 400

    def test_add_unknown_product(self, client):
        resp = client.post("/api/cart", json={"productId": "Z"}, headers=_as("alice"))
        assert resp.status_code == 404

    def test_update_and_remove(self, client):
        client.post("/api/cart", json={"productId": "A"}, headers=_as("alice"))
        updated = client.put("/api/cart/A", json={"quantity": 4}, headers=_as("alice")).get_json()
        assert updated["data"][0]["quantity"] == 4

        assert client.delete("/api/cart/A", headers=_as("alice")).get_json()["count"] == 0
        assert client.delete("/api/cart/A", headers=_as("alice")).status_code == 404

    def test_clear(self, client):
        client.post("/api/cart", json={"productId": "A"}, headers=_as("alice"))
        assert client.delete("/api/cart", headers=_as("alice")).get_json()["count"] == 0


class TestUnexpectedErrors:

    def test_storage_failure_is_generic_500(self, client, repos):
        def broken(user_id):
            raise OSError("/var/data/orders.json: permission denied")

        repos.orders.list_for_user = broken
        resp = client.get("/api/orders", headers=_as("alice"))

        assert resp.status_code == 500
        assert resp.get_json() == {"success": False, "message": "Server error"}
