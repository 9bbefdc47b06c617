"""Application service: Update Cart Item use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


def _parse_quantity(raw: object) -> int:
    # unparseable input counts as zero, which removes the entry
    try:
        return max(0, int(raw))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


class UpdateCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, caller: User, product_id: str, quantity: object) -> CartDTO:
        """Replace the quantity for one entry; zero removes it."""
        cart = self._cart_repo.get_for_user(caller.id)
        cart.set_quantity(product_id, _parse_quantity(quantity))
        self._cart_repo.save(cart)
        return cart_to_dto(cart, self._product_repo)
