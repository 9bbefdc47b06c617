"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, caller: User) -> CartDTO:
        return cart_to_dto(self._cart_repo.get_for_user(caller.id), self._product_repo)
