"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class RemoveFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, caller: User, product_id: str) -> CartDTO:
        cart = self._cart_repo.get_for_user(caller.id)
        cart.remove(product_id)
        self._cart_repo.save(cart)
        return cart_to_dto(cart, self._product_repo)
