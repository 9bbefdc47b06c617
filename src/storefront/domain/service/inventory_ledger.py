"""Domain service: Inventory Ledger.

Owns every stock movement the order engine makes. A batch of deltas for
one order is all-or-nothing: each product moves by its own atomic,
conditional update, and if any decrement is refused the products already
moved in the same batch are put back before failure is reported.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.stock_journal_repository import (
    StockJournalRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockAdjustment:
    """Outcome of one ``adjust`` call."""

    applied: dict[str, int] = field(default_factory=dict)
    failed_product_id: str | None = None
    available: int | None = None
    replayed: bool = False

    @property
    def succeeded(self) -> bool:
        return self.failed_product_id is None


class InventoryLedger:

    def __init__(
        self,
        product_repo: ProductRepository,
        journal_repo: StockJournalRepository,
    ) -> None:
        self._product_repo = product_repo
        self._journal_repo = journal_repo

    def adjust(
        self,
        deltas: Mapping[str, int],
        reference: str | None = None,
    ) -> StockAdjustment:
        """Apply signed stock deltas as one batch.

        Products are visited in sorted ID order so concurrent batches touch
        shared products in the same sequence. With a ``reference``, the batch
        is claimed in the journal before any stock moves; a reference someone
        else already claimed is skipped and reported as success. A claim
        whose batch is refused is released again.
        """
        if reference is not None and not self._journal_repo.claim(reference, dict(deltas)):
            logger.info("Stock adjustment %s already applied, skipping", reference)
            return StockAdjustment(replayed=True)

        applied: dict[str, int] = {}
        for product_id in sorted(deltas):
            delta = deltas[product_id]
            if delta == 0:
                continue
            new_stock = self._product_repo.adjust_stock(product_id, delta)
            if new_stock is not None:
                applied[product_id] = delta
                continue

            if delta > 0:
                # Nothing to put the units back onto; the product is gone.
                logger.warning(
                    "Product %s no longer exists, %d units not restocked",
                    product_id,
                    delta,
                )
                continue

            product = self._product_repo.get_by_id(product_id)
            available = product.stock if product is not None else 0
            self._rollback(applied)
            if reference is not None:
                self._journal_repo.release(reference)
            return StockAdjustment(failed_product_id=product_id, available=available)

        return StockAdjustment(applied=applied)

    def _rollback(self, applied: Mapping[str, int]) -> None:
        for product_id, delta in applied.items():
            if self._product_repo.adjust_stock(product_id, -delta) is None:
                logger.error(
                    "Rollback of %d units on product %s was refused", -delta, product_id
                )
