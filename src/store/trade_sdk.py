"""Python SDK for trade imports.

This module exposes high-level APIs for importing trade files and
inspecting stored trades, backed by the SQLAlchemy trade store.
"""

from __future__ import annotations

from core.config import TradeflowConfig
from core.types import ImportOptions, ImportResult, TradeRecord
from ingest.pipeline import import_trades
from store.trade_store import SqlTradeStore


class TradeflowClient:
    """Primary SDK entry point for trade imports."""

    def __init__(self, config: TradeflowConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or TradeflowConfig.from_env()
        self._store: SqlTradeStore | None = None

    @property
    def store(self) -> SqlTradeStore:
        """Trade store built lazily from config."""
        if self._store is None:
            self._store = SqlTradeStore.from_config(self._config)
        return self._store

    def import_file(self, options: ImportOptions) -> ImportResult:
        """Import one trade source into the store.

        Args:
            options: Import options.

        Returns:
            Import summary.

        Raises:
            TradeflowIngestError: If the source cannot be read.
            TradeflowStoreError: If the batch cannot be persisted.
        """
        sink = None if options.dry_run else self.store
        return import_trades(options, self._config, sink)

    def list_trades(self, limit: int | None = None) -> list[TradeRecord]:
        """Return stored trades in insertion order."""
        return self.store.load_trades(limit)

    def close(self) -> None:
        """Release database connections held by the store, if one was built."""
        if self._store is not None:
            self._store.dispose()
            self._store = None
