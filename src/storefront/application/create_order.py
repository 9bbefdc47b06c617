"""Application service: Create Order use case.

Turns the caller's cart into a pending order. The availability check, the
stock decrement and the order insert form one unit: the ledger's
conditional decrement is the final word on availability, and a failed
insert gives the stock back. Clearing the cart comes last and is
best-effort, since the order already exists by then.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EmptyCartError, InsufficientStockError
from storefront.domain.model.order import (
    Order,
    OrderItem,
    PaymentMethod,
    ShippingAddress,
)
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)

_ADDRESS_FIELDS = ("address", "city", "state", "zip", "country")


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        cart_repo: CartRepository,
        ledger: InventoryLedger,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._cart_repo = cart_repo
        self._ledger = ledger

    def handle(
        self,
        caller: User,
        shipping_address: Mapping[str, object] | None = None,
        payment_method: object = None,
    ) -> OrderDTO:
        """Place an order from everything in the caller's cart.

        Steps:
        1. Resolve cart entries to live products, skipping vanished ones.
        2. Reject the whole order if any line asks for more than is in stock.
        3. Snapshot prices into order items.
        4. Decrement stock conditionally, then persist the order.
        5. Empty the cart.
        """
        cart = self._cart_repo.get_for_user(caller.id)
        lines = self._resolve_lines(cart.entries)
        if not lines:
            raise EmptyCartError()

        for product, qty in lines:
            if not product.has_stock_for(qty.value):
                raise InsufficientStockError(product.id, product.stock, product.name)

        items = [
            OrderItem(
                product_id=product.id,
                product_name=product.name,
                vendor_id=product.vendor_id,
                quantity=qty,
                price=product.price,  # <-- price snapshot
            )
            for product, qty in lines
        ]
        order = Order.create(
            user_id=caller.id,
            items=items,
            shipping_address=self._build_address(caller, shipping_address or {}),
            payment_method=PaymentMethod.from_request(payment_method),
        )

        self._place(order, {p.id: p.name for p, _ in lines})

        try:
            cart.clear()
            self._cart_repo.save(cart)
        except Exception:
            logger.warning(
                "Order #%s placed but cart of user %s was not cleared",
                order.id,
                caller.id,
                exc_info=True,
            )

        logger.info(
            "Order #%s placed by user %s: %d items, total %s",
            order.id,
            caller.id,
            len(order.items),
            order.total_amount,
        )
        return order_to_dto(order)

    # --- Steps ----------------------------------------------------------------

    def _resolve_lines(self, entries) -> list[tuple[Product, Quantity]]:
        lines: list[tuple[Product, Quantity]] = []
        for entry in entries:
            product = self._product_repo.get_by_id(entry.product_id)
            if product is None:
                logger.warning("Skipping cart entry for missing product %s", entry.product_id)
                continue
            lines.append((product, Quantity.clamped(entry.quantity)))
        return lines

    def _place(self, order: Order, names: dict[str, str]) -> None:
        deltas = {pid: -qty for pid, qty in order.stock_deltas.items()}
        result = self._ledger.adjust(deltas)
        if not result.succeeded:
            # Another checkout took the stock between our check and the decrement.
            raise InsufficientStockError(
                result.failed_product_id,  # type: ignore[arg-type]
                result.available or 0,
                names.get(result.failed_product_id or ""),
            )

        try:
            self._order_repo.save(order)
        except Exception:
            logger.error("Saving new order failed, returning stock %s", result.applied)
            self._ledger.adjust({pid: -delta for pid, delta in result.applied.items()})
            raise

    @staticmethod
    def _build_address(caller: User, raw: Mapping[str, object]) -> ShippingAddress:
        values = {name: str(raw.get(name) or "") for name in _ADDRESS_FIELDS}
        full_name = str(raw.get("fullName") or raw.get("full_name") or caller.name or "")
        return ShippingAddress(full_name=full_name, **values)
