"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    ShippingAddress,
)
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._store.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_for_user(self, user_id: str) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._store.load() if raw["user"] == user_id]
        return self._newest_first(orders)

    def list_containing_products(self, product_ids: Iterable[str]) -> list[Order]:
        wanted = set(product_ids)
        orders = [
            self._to_domain(raw)
            for raw in self._store.load()
            if any(item["product"] in wanted for item in raw["items"])
        ]
        return self._newest_first(orders)

    def save(self, order: Order) -> None:
        with self._store.transaction() as records:
            if order.id is None:
                order.id = max((r["id"] for r in records), default=0) + 1

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(records):
                if raw["id"] == order.id:
                    records[i] = self._to_raw(order)
                    break
            else:
                records.append(self._to_raw(order))

    @staticmethod
    def _newest_first(orders: list[Order]) -> list[Order]:
        return sorted(orders, key=lambda o: (o.created_at, o.id or 0), reverse=True)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        address = order.shipping_address
        return {
            "id": order.id,
            "user": order.user_id,
            "items": [
                {
                    "product": item.product_id,
                    "name": item.product_name,
                    "vendor": item.vendor_id,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                }
                for item in order.items
            ],
            "totalAmount": str(order.total_amount.amount),
            "shippingAddress": {
                "fullName": address.full_name,
                "address": address.address,
                "city": address.city,
                "state": address.state,
                "zip": address.zip,
                "country": address.country,
            },
            "paymentMethod": order.payment_method.value,
            "status": order.status.value,
            "stockRestored": order.stock_restored,
            "createdAt": order.created_at.isoformat(),
            "updatedAt": order.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product"],
                product_name=i.get("name", ""),
                vendor_id=i.get("vendor", ""),
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"])),
            )
            for i in raw["items"]
        ]
        address = raw.get("shippingAddress", {})
        return Order(
            id=raw["id"],
            user_id=raw["user"],
            items=items,
            total_amount=Money(Decimal(raw["totalAmount"])),
            shipping_address=ShippingAddress(
                full_name=address.get("fullName", ""),
                address=address.get("address", ""),
                city=address.get("city", ""),
                state=address.get("state", ""),
                zip=address.get("zip", ""),
                country=address.get("country", ""),
            ),
            payment_method=PaymentMethod(raw.get("paymentMethod", "cod")),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["createdAt"]),
            updated_at=datetime.fromisoformat(raw["updatedAt"]),
            stock_restored=raw.get("stockRestored", False),
        )
