"""Application service: Cancel Order use case.

Only the customer who placed the order may cancel it, and only while it is
pending or confirmed. Stock goes back first, under a per-order ledger
reference, and the cancelled status is written after. The ledger claims
the reference before moving stock, so overlapping cancels and a retry after
a crash between the two steps never restock twice.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import NotCancellableError, NotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.authorization import ensure_can_cancel
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


def restock_reference(order_id: int) -> str:
    return f"order:{order_id}:restock"


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        ledger: InventoryLedger,
    ) -> None:
        self._order_repo = order_repo
        self._ledger = ledger

    def handle(self, order_id: int, caller: User) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        ensure_can_cancel(order, caller)
        if not order.is_cancellable:
            raise NotCancellableError(order.status.value)

        if not order.stock_restored:
            self._ledger.adjust(order.stock_deltas, reference=restock_reference(order_id))
            order.mark_stock_restored()

        order.cancel()
        self._order_repo.save(order)

        logger.info("Order #%s cancelled by user %s", order_id, caller.id)
        return order_to_dto(order)
