"""Integration tests for the vendor/admin status update."""

import logging

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import InvalidStatusError, NotAuthorizedError, NotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from tests.fakes import fake_repositories

ALICE = User("alice", "Alice", Role.CUSTOMER)
VENDOR_V = User("V", "Vera", Role.VENDOR)
VENDOR_X = User("X", "Xan", Role.VENDOR)
ADMIN = User("root", "Root", Role.ADMIN)


def _setup():
    repos = fake_repositories(
        products=[Product(id="A", name="Lamp", price=Money.of("10"), vendor_id="V", stock=5)],
        users=[ALICE, VENDOR_V, VENDOR_X, ADMIN],
    )
    cart = repos.carts.get_for_user(ALICE.id)
    cart.add("A", 2)
    repos.carts.save(cart)
    dto = CreateOrderHandler(repos.orders, repos.products, repos.carts, repos.ledger).handle(ALICE)
    return dto.id, repos, UpdateOrderStatusHandler(repos.orders)


class TestStatusUpdate:

    def test_vendor_with_item_can_update(self):
        order_id, repos, handler = _setup()
        dto = handler.handle(order_id, VENDOR_V, "confirmed")
        assert dto.status == "confirmed"
        assert repos.orders.get_by_id(order_id).status == OrderStatus.CONFIRMED

    def test_admin_can_update(self):
        order_id, _, handler = _setup()
        assert handler.handle(order_id, ADMIN, "shipped").status == "shipped"

    def test_override_skips_graph_and_leaves_stock(self, caplog):
        order_id, repos, handler = _setup()
        with caplog.at_level(logging.WARNING):
            dto = handler.handle(order_id, ADMIN, "delivered")
        assert dto.status == "delivered"
        assert repos.products.stock_of("A") == 3
        assert "outside the lifecycle graph" in caplog.text

    def test_override_to_cancelled_does_not_restock(self):
        order_id, repos, handler = _setup()
        handler.handle(order_id, VENDOR_V, "cancelled")
        assert repos.products.stock_of("A") == 3

    def test_legal_move_not_flagged(self, caplog):
        order_id, _, handler = _setup()
        with caplog.at_level(logging.WARNING):
            handler.handle(order_id, VENDOR_V, "confirmed")
        assert "outside the lifecycle graph" not in caplog.text


class TestStatusUpdateRejected:

    @pytest.mark.parametrize("status", ["lost", None, ""])
    def test_invalid_status(self, status):
        order_id, repos, handler = _setup()
        with pytest.raises(InvalidStatusError):
            handler.handle(order_id, ADMIN, status)
        assert repos.orders.get_by_id(order_id).status == OrderStatus.PENDING

    @pytest.mark.parametrize("caller", [ALICE, VENDOR_X])
    def test_unauthorized(self, caller):
        order_id, repos, handler = _setup()
        with pytest.raises(NotAuthorizedError):
            handler.handle(order_id, caller, "shipped")
        assert repos.orders.get_by_id(order_id).status == OrderStatus.PENDING

    def test_unknown_order(self):
        _, _, handler = _setup()
        with pytest.raises(NotFoundError):
            handler.handle(42, ADMIN, "shipped")
