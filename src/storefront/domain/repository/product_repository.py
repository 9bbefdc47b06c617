"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on infrastructure.
The order engine only reads products and moves their stock counter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_by_vendor(self, vendor_id: str) -> list[Product]:
        """Return every product owned by a vendor."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def adjust_stock(self, product_id: str, delta: int) -> int | None:
        """Atomically add ``delta`` to a product's stock.

        The update is applied only if the resulting stock is >= 0. Returns
        the new stock level, or None when the product does not exist or the
        update was refused. The check and the write must not interleave
        with another call for the same product.
        """
