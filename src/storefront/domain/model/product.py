"""Product, as seen by the order engine.

The catalog itself is managed elsewhere. Orders only read a product's
price, name and vendor, and the inventory ledger moves its stock counter.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A sellable product owned by one vendor.

    Invariant: ``stock`` is never negative once a write has committed.
    """

    id: str
    name: str
    price: Money
    vendor_id: str
    stock: int = 0

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock
