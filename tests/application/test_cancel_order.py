"""Integration tests for the CancelOrder use case."""

import pytest

from storefront.application.cancel_order import CancelOrderHandler, restock_reference
from storefront.application.create_order import CreateOrderHandler
from storefront.domain.exceptions import NotAuthorizedError, NotCancellableError, NotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from tests.fakes import fake_repositories

ALICE = User("alice", "Alice", Role.CUSTOMER)
BOB = User("bob", "Bob", Role.CUSTOMER)
ADMIN = User("root", "Root", Role.ADMIN)


def _place_order(*cart: tuple[str, int]):
    """Place one order for Alice and return (order_id, repos)."""
    repos = fake_repositories(
        products=[
            Product(id="A", name="Lamp", price=Money.of("10"), vendor_id="V", stock=5),
            Product(id="B", name="Desk", price=Money.of("20"), vendor_id="W", stock=4),
        ],
        users=[ALICE, BOB, ADMIN],
    )
    user_cart = repos.carts.get_for_user(ALICE.id)
    for product_id, qty in cart or (("A", 2),):
        user_cart.add(product_id, qty)
    repos.carts.save(user_cart)
    dto = CreateOrderHandler(repos.orders, repos.products, repos.carts, repos.ledger).handle(ALICE)
    return dto.id, repos


def _cancel(repos, order_id, caller=ALICE):
    return CancelOrderHandler(repos.orders, repos.ledger).handle(order_id, caller)


class TestCancelHappyPath:

    def test_pending_order_restores_stock(self):
        order_id, repos = _place_order()
        assert repos.products.stock_of("A") == 3

        dto = _cancel(repos, order_id)

        assert dto.status == "cancelled"
        assert repos.products.stock_of("A") == 5

    def test_confirmed_order_restores_every_item(self):
        order_id, repos = _place_order(("A", 2), ("B", 3))
        order = repos.orders.get_by_id(order_id)
        order.advance_to(OrderStatus.CONFIRMED)
        repos.orders.save(order)

        _cancel(repos, order_id)

        assert repos.products.stock_of("A") == 5
        assert repos.products.stock_of("B") == 4

    def test_records_restock_in_journal(self):
        order_id, repos = _place_order()
        _cancel(repos, order_id)
        assert repos.stock_journal.contains(restock_reference(order_id))
        assert repos.orders.get_by_id(order_id).stock_restored


class TestCancelRejected:

    def test_second_cancel_fails_and_keeps_stock(self):
        order_id, repos = _place_order()
        _cancel(repos, order_id)

        with pytest.raises(NotCancellableError, match="cancelled"):
            _cancel(repos, order_id)
        assert repos.products.stock_of("A") == 5

    @pytest.mark.parametrize("status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED])
    def test_late_statuses_not_cancellable(self, status):
        order_id, repos = _place_order()
        order = repos.orders.get_by_id(order_id)
        order.override_status(status)
        repos.orders.save(order)

        with pytest.raises(NotCancellableError):
            _cancel(repos, order_id)

        assert repos.orders.get_by_id(order_id).status == status
        assert repos.products.stock_of("A") == 3

    @pytest.mark.parametrize("caller", [BOB, ADMIN])
    def test_only_owner_may_cancel(self, caller):
        order_id, repos = _place_order()
        with pytest.raises(NotAuthorizedError):
            _cancel(repos, order_id, caller)
        assert repos.orders.get_by_id(order_id).status == OrderStatus.PENDING
        assert repos.products.stock_of("A") == 3

    def test_unknown_order(self):
        _, repos = _place_order()
        with pytest.raises(NotFoundError):
            _cancel(repos, 999)


class TestCancelRetry:

    def test_retry_after_crash_before_status_write_does_not_double_restock(self):
        order_id, repos = _place_order()
        # Crash simulation: restock ran, the status write never happened.
        repos.ledger.adjust({"A": 2}, reference=restock_reference(order_id))
        assert repos.products.stock_of("A") == 5

        dto = _cancel(repos, order_id)

        assert dto.status == "cancelled"
        assert repos.products.stock_of("A") == 5
