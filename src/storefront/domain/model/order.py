"""Order aggregate — the core of the domain.

An order is an immutable snapshot of a cart at checkout: its items keep the
price, name and vendor the product had at that moment. After creation only
the status (and the stock-restoration marker) ever changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import (
    InvalidStatusError,
    InvalidTransitionError,
    NotCancellableError,
    ValidationError,
)
from storefront.domain.model.value_objects import Money, Quantity


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(raw: object) -> OrderStatus:
        """Map a wire value onto the enum, or raise InvalidStatusError."""
        if isinstance(raw, OrderStatus):
            return raw
        if not isinstance(raw, str):
            raise InvalidStatusError(raw)
        try:
            return OrderStatus(raw)
        except ValueError:
            raise InvalidStatusError(raw) from None

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

CANCELLABLE = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})


class PaymentMethod(Enum):
    CASH_ON_DELIVERY = "cod"
    CARD = "card"

    @staticmethod
    def from_request(raw: object) -> PaymentMethod:
        # card only when asked for explicitly, anything else is cash on delivery
        return PaymentMethod.CARD if raw == "card" else PaymentMethod.CASH_ON_DELIVERY


@dataclass(frozen=True)
class ShippingAddress:
    full_name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""


@dataclass(frozen=True)
class OrderItem:
    """One ordered line; every field is locked at order-creation time."""

    product_id: str
    product_name: str
    vendor_id: str
    quantity: Quantity
    price: Money

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders. The plain constructor exists so
    repositories can reconstitute stored orders without re-validating them.
    """

    id: int | None
    user_id: str
    items: list[OrderItem]
    total_amount: Money
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)
    payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    stock_restored: bool = False

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderItem],
        shipping_address: ShippingAddress,
        payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY,
    ) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        now = _now()
        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            total_amount=Money.sum(item.line_total for item in items),
            shipping_address=shipping_address,
            payment_method=payment_method,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def can_transition_to(self, status: OrderStatus) -> bool:
        return status in TRANSITIONS[self.status]

    def advance_to(self, status: OrderStatus) -> None:
        """Edge-validated transition along the lifecycle graph."""
        if not self.can_transition_to(status):
            raise InvalidTransitionError(
                f"Cannot move order from {self.status.value} to {status.value}"
            )
        self._set_status(status)

    def override_status(self, status: OrderStatus) -> None:
        """Administrative override: any status, graph not consulted."""
        self._set_status(status)

    @property
    def is_cancellable(self) -> bool:
        return self.status in CANCELLABLE

    def cancel(self) -> None:
        """Customer cancellation, allowed from pending or confirmed only.

        Stock must already have been restored by the caller (see
        ``mark_stock_restored``) before this is persisted.
        """
        if not self.is_cancellable:
            raise NotCancellableError(self.status.value)
        self.advance_to(OrderStatus.CANCELLED)

    def mark_stock_restored(self) -> None:
        self.stock_restored = True
        self.updated_at = _now()

    # --- Computed properties --------------------------------------------------

    @property
    def stock_deltas(self) -> dict[str, int]:
        """Units per product this order took out of stock."""
        deltas: dict[str, int] = {}
        for item in self.items:
            deltas[item.product_id] = deltas.get(item.product_id, 0) + item.quantity.value
        return deltas

    @property
    def vendor_ids(self) -> frozenset[str]:
        return frozenset(item.vendor_id for item in self.items if item.vendor_id)

    def _set_status(self, status: OrderStatus) -> None:
        self.status = status
        self.updated_at = _now()
