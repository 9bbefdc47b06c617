"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, caller: User) -> CartDTO:
        cart = self._cart_repo.get_for_user(caller.id)
        cart.clear()
        self._cart_repo.save(cart)
        return CartDTO(user_id=caller.id, items=[])
