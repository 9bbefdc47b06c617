"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.cart import Cart, CartEntry
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    def get_for_user(self, user_id: str) -> Cart:
        for raw in self._store.load():
            if raw["user"] == user_id:
                return Cart(
                    user_id=user_id,
                    entries=[
                        CartEntry(product_id=e["product"], quantity=e["quantity"])
                        for e in raw["items"]
                    ],
                )
        return Cart(user_id=user_id)

    def save(self, cart: Cart) -> None:
        raw_cart = {
            "user": cart.user_id,
            "items": [
                {"product": e.product_id, "quantity": e.quantity} for e in cart.entries
            ],
        }
        with self._store.transaction() as records:
            for i, raw in enumerate(records):
                if raw["user"] == cart.user_id:
                    records[i] = raw_cart
                    break
            else:
                records.append(raw_cart)
