"""Domain service: one vendor's slice of a multi-vendor order."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class VendorOrderView:
    """Read-only projection; never persisted, rebuilt on every read."""

    order: Order
    items: tuple[OrderItem, ...]
    vendor_subtotal: Money


def project_for_vendor(order: Order, vendor_id: str) -> VendorOrderView | None:
    """Keep only the vendor's items, or return None if it has none."""
    items = tuple(item for item in order.items if item.vendor_id == vendor_id)
    if not items:
        return None
    return VendorOrderView(
        order=order,
        items=items,
        vendor_subtotal=Money.sum(item.line_total for item in items),
    )


def project_all_for_vendor(orders: list[Order], vendor_id: str) -> list[VendorOrderView]:
    views = (project_for_vendor(order, vendor_id) for order in orders)
    return [view for view in views if view is not None]
