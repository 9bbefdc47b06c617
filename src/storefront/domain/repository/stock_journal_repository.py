"""Abstract journal of referenced stock adjustments.

The inventory ledger claims a reference here before it moves any stock, so
two callers replaying the same reference (overlapping cancellations, or a
retry after a crash) cannot both apply it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StockJournalRepository(ABC):

    @abstractmethod
    def contains(self, reference: str) -> bool:
        """True if an adjustment with this reference has been claimed."""

    @abstractmethod
    def claim(self, reference: str, deltas: dict[str, int]) -> bool:
        """Record ``reference`` unless it is already there.

        Check and insert happen atomically. Returns False when another
        caller got there first.
        """

    @abstractmethod
    def release(self, reference: str) -> None:
        """Drop a claim whose adjustment was refused and never applied."""
