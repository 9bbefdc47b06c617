"""Cart aggregate: a customer's list of products and quantities.

A cart holds no prices and performs no stock checks. Both are resolved
when the cart is turned into an order, so a cart may ask for more units
than are currently in stock until checkout is attempted.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import NotInCartError
from storefront.domain.model.value_objects import Quantity


@dataclass
class CartEntry:
    product_id: str
    quantity: int


@dataclass
class Cart:
    user_id: str
    entries: list[CartEntry] = field(default_factory=list)

    def add(self, product_id: str, quantity: object = 1) -> CartEntry:
        """Merge into an existing entry or append a new one."""
        qty = Quantity.clamped(quantity).value
        entry = self._find(product_id)
        if entry is not None:
            entry.quantity += qty
            return entry
        entry = CartEntry(product_id=product_id, quantity=qty)
        self.entries.append(entry)
        return entry

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Replace an entry's quantity; zero or less removes it."""
        entry = self._find(product_id)
        if entry is None:
            raise NotInCartError(product_id)
        if quantity <= 0:
            self.entries.remove(entry)
        else:
            entry.quantity = quantity

    def remove(self, product_id: str) -> None:
        entry = self._find(product_id)
        if entry is None:
            raise NotInCartError(product_id)
        self.entries.remove(entry)

    def clear(self) -> None:
        self.entries = []

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def _find(self, product_id: str) -> CartEntry | None:
        for entry in self.entries:
            if entry.product_id == product_id:
                return entry
        return None
