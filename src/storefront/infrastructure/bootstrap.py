"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.stock_journal_repository import (
    StockJournalRepository,
)
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.inventory_ledger import InventoryLedger
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_stock_journal_repository import (
    JsonStockJournalRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


@dataclass(frozen=True)
class Repositories:
    """Everything a handler may need, built once per process."""

    orders: OrderRepository
    products: ProductRepository
    users: UserRepository
    carts: CartRepository
    stock_journal: StockJournalRepository

    @property
    def ledger(self) -> InventoryLedger:
        return InventoryLedger(self.products, self.stock_journal)


def json_repositories(data_dir: Path | None = None) -> Repositories:
    root = data_dir or Settings.from_env().data_dir
    return Repositories(
        orders=JsonOrderRepository(root / "orders.json"),
        products=JsonProductRepository(root / "products.json"),
        users=JsonUserRepository(root / "users.json"),
        carts=JsonCartRepository(root / "carts.json"),
        stock_journal=JsonStockJournalRepository(root / "stock_journal.json"),
    )
