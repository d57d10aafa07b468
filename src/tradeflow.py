"""Public SDK surface for Tradeflow.

This module provides a stable import path for library users.
It re-exports the primary client, pipeline entry points, and typed models.
"""

from __future__ import annotations

from core.config import TradeflowConfig
from core.errors import (
    TradeflowConfigError,
    TradeflowDependencyError,
    TradeflowError,
    TradeflowIngestError,
    TradeflowStoreError,
)
from core.types import ImportOptions, ImportResult, TradeFieldIssue, TradeRecord
from ingest.input_reader import read_stream_lines, read_trade_lines
from ingest.pipeline import TradeParseResult, import_trades, parse_trades, process_trades
from ingest.trade_mapping import map_trade_fields
from ingest.trade_validation import find_trade_field_issue, validate_trade_fields
from store.trade_sdk import TradeflowClient
from store.trade_sink import TradeSink
from store.trade_store import SqlTradeStore

__all__ = [
    "ImportOptions",
    "ImportResult",
    "SqlTradeStore",
    "TradeFieldIssue",
    "TradeParseResult",
    "TradeRecord",
    "TradeSink",
    "TradeflowClient",
    "TradeflowConfig",
    "TradeflowConfigError",
    "TradeflowDependencyError",
    "TradeflowError",
    "TradeflowIngestError",
    "TradeflowStoreError",
    "find_trade_field_issue",
    "import_trades",
    "map_trade_fields",
    "parse_trades",
    "process_trades",
    "read_stream_lines",
    "read_trade_lines",
    "validate_trade_fields",
]
