"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return a user's orders, newest first."""

    @abstractmethod
    def list_containing_products(self, product_ids: Iterable[str]) -> list[Order]:
        """Return orders with at least one item for the given products, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID to new ones."""
