"""Application service: Add To Cart use case.

The product must exist, but its stock is not checked; availability is
only enforced when the cart is turned into an order.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, caller: User, product_id: str | None, quantity: object = 1) -> CartDTO:
        if not product_id:
            raise ValidationError("productId is required")
        if self._product_repo.get_by_id(product_id) is None:
            raise NotFoundError("Product not found")

        cart = self._cart_repo.get_for_user(caller.id)
        cart.add(product_id, quantity)
        self._cart_repo.save(cart)
        return cart_to_dto(cart, self._product_repo)
