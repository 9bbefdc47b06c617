"""Domain service: who may read or act on an order.

Every entry point asks these functions instead of re-deriving ownership or
vendor membership itself. They are pure: the decision depends only on the
caller and the vendor IDs captured on the order's items.
"""

from __future__ import annotations

from storefront.domain.exceptions import NotAuthorizedError
from storefront.domain.model.order import Order
from storefront.domain.model.user import User


def is_owner(order: Order, caller: User) -> bool:
    return order.user_id == caller.id


def sells_in(order: Order, caller: User) -> bool:
    """True if the caller is a vendor with at least one item in the order."""
    return caller.is_vendor and caller.id in order.vendor_ids


def can_view(order: Order, caller: User) -> bool:
    return is_owner(order, caller) or caller.is_admin or sells_in(order, caller)


def can_update_status(order: Order, caller: User) -> bool:
    return caller.is_admin or sells_in(order, caller)


def can_cancel(order: Order, caller: User) -> bool:
    return is_owner(order, caller)


def ensure_can_view(order: Order, caller: User) -> None:
    if not can_view(order, caller):
        raise NotAuthorizedError("Not authorized to view this order")


def ensure_can_update_status(order: Order, caller: User) -> None:
    if not can_update_status(order, caller):
        raise NotAuthorizedError("Not authorized to update this order")


def ensure_can_cancel(order: Order, caller: User) -> None:
    if not can_cancel(order, caller):
        raise NotAuthorizedError("Not authorized to cancel this order")
