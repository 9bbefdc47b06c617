"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.authorization import ensure_can_view


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, caller: User) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        ensure_can_view(order, caller)
        return order_to_dto(order)
