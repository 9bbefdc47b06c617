"""Unit tests for the per-vendor order projection."""

from storefront.domain.model.order import Order, OrderItem, ShippingAddress
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.vendor_projection import (
    project_all_for_vendor,
    project_for_vendor,
)


def _order(order_id: int, *items: OrderItem) -> Order:
    order = Order.create("alice", list(items), ShippingAddress())
    order.id = order_id
    return order


A_FROM_V = OrderItem("A", "Lamp", "V", Quantity(2), Money.of("10"))
B_FROM_W = OrderItem("B", "Desk", "W", Quantity(1), Money.of("20"))
C_FROM_V = OrderItem("C", "Bulb", "V", Quantity(3), Money.of("1.50"))


class TestProjectForVendor:

    def test_keeps_only_vendor_items(self):
        view = project_for_vendor(_order(1, A_FROM_V, B_FROM_W), "V")
        assert [i.product_id for i in view.items] == ["A"]
        assert view.vendor_subtotal == Money.of("20")

    def test_subtotal_over_several_items(self):
        view = project_for_vendor(_order(1, A_FROM_V, B_FROM_W, C_FROM_V), "V")
        assert view.vendor_subtotal == Money.of("24.50")

    def test_underlying_order_not_mutated(self):
        order = _order(1, A_FROM_V, B_FROM_W)
        project_for_vendor(order, "V")
        assert len(order.items) == 2
        assert order.total_amount == Money.of("40")

    def test_no_matching_items(self):
        assert project_for_vendor(_order(1, B_FROM_W), "V") is None


class TestProjectAll:

    def test_orders_without_vendor_items_are_dropped(self):
        orders = [_order(1, A_FROM_V), _order(2, B_FROM_W), _order(3, C_FROM_V, B_FROM_W)]
        views = project_all_for_vendor(orders, "V")
        assert [v.order.id for v in views] == [1, 3]
