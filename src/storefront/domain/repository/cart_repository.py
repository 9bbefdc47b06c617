"""Abstract repository for per-user carts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_for_user(self, user_id: str) -> Cart:
        """Return the user's cart, an empty one if none was stored yet."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart, replacing any stored version."""
