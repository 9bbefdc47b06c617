"""Application service: Update Order Status use case (vendor/admin).

This is the administrative override path: an admin, or a vendor selling
at least one item in the order, may set any of the five statuses. The
lifecycle graph is not enforced and stock is never touched here; only
customer cancellation puts stock back.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.authorization import ensure_can_update_status

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, caller: User, status: object) -> OrderDTO:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        ensure_can_update_status(order, caller)

        previous = order.status
        if new_status is not previous and not order.can_transition_to(new_status):
            logger.warning(
                "Order #%s moved %s -> %s by %s %s outside the lifecycle graph; stock unchanged",
                order_id,
                previous.value,
                new_status.value,
                caller.role.value,
                caller.id,
            )

        order.override_status(new_status)
        self._order_repo.save(order)

        logger.info(
            "Order #%s status %s -> %s by user %s",
            order_id,
            previous.value,
            new_status.value,
            caller.id,
        )
        return order_to_dto(order)
