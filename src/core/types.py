"""Shared typed models.

This module defines immutable data models used by the ingest
pipeline, the trade store, and the SDK to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TradeRecord:
    """Normalized currency trade parsed from one input line.

    Attributes:
        source_currency: First three characters of the currency pair.
        destination_currency: Last three characters of the currency pair.
        lots: Trade amount divided by the fixed lot size.
        price: Exact decimal trade price.
    """

    source_currency: str
    destination_currency: str
    lots: float
    price: Decimal


@dataclass(frozen=True)
class TradeFieldIssue:
    """One validation failure for an input line.

    Attributes:
        line_number: One-based position of the line in the input.
        reason: Failed check: field_count, currency_pair, trade_amount, trade_price.
        value: Offending raw value, or the field count for field_count failures.
        message: Human-readable diagnostic.
    """

    line_number: int
    reason: str
    value: str
    message: str


@dataclass(frozen=True)
class ImportOptions:
    """Import command options.

    Attributes:
        source_uri: Input file path or ``s3://bucket/key`` URI.
        dry_run: Parse and validate without writing to the store.
    """

    source_uri: str
    dry_run: bool = False


@dataclass(frozen=True)
class ImportResult:
    """Summary of one import run.

    Attributes:
        line_count: Number of input lines considered.
        trade_count: Number of valid trades produced.
        rejected_count: Number of lines dropped by validation.
        stored: Whether the batch was handed to the store.
    """

    line_count: int
    trade_count: int
    rejected_count: int
    stored: bool
