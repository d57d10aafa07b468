"""Persistence sink contract for trade batches."""

from __future__ import annotations

from typing import Protocol, Sequence

from core.types import TradeRecord


class TradeSink(Protocol):
    """Destination that persists a whole trade batch atomically."""

    def write_batch(self, trades: Sequence[TradeRecord]) -> int:
        """Persist every trade or none of them.

        Args:
            trades: Ordered trade batch for one run.

        Returns:
            Number of trades written.

        Raises:
            TradeflowStoreError: If the batch cannot be committed.
        """
        ...
