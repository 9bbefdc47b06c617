"""JSON-file-backed implementation of StockJournalRepository."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from storefront.domain.repository.stock_journal_repository import (
    StockJournalRepository,
)
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonStockJournalRepository(StockJournalRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    def contains(self, reference: str) -> bool:
        return any(raw["reference"] == reference for raw in self._store.load())

    def claim(self, reference: str, deltas: dict[str, int]) -> bool:
        with self._store.transaction() as records:
            if any(raw["reference"] == reference for raw in records):
                return False
            records.append(
                {
                    "reference": reference,
                    "deltas": deltas,
                    "appliedAt": datetime.now(timezone.utc).isoformat(),
                }
            )
            return True

    def release(self, reference: str) -> None:
        with self._store.transaction() as records:
            records[:] = [raw for raw in records if raw["reference"] != reference]
