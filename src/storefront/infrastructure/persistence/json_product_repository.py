"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._store.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_by_vendor(self, vendor_id: str) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in self._store.load()
            if raw.get("vendor") == vendor_id
        ]

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.load()]

    def adjust_stock(self, product_id: str, delta: int) -> int | None:
        with self._store.transaction() as records:
            for raw in records:
                if raw["id"] != product_id:
                    continue
                new_stock = int(raw.get("stock", 0)) + delta
                if new_stock < 0:
                    return None
                raw["stock"] = new_stock
                return new_stock
            return None

    def save(self, product: Product) -> None:
        """Upsert a product; the order engine itself only ever moves stock."""
        with self._store.transaction() as records:
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "vendor": product.vendor_id,
            "stock": product.stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw.get("name", ""),
            price=Money(Decimal(str(raw["price"]))),
            vendor_id=raw.get("vendor", ""),
            stock=int(raw.get("stock", 0)),
        )
