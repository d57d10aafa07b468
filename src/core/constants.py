"""Core constants used across Tradeflow modules.

This module centralizes trade-format and runtime defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

LOT_SIZE = 100000
FIELD_DELIMITER = ","
TRADE_FIELD_COUNT = 3
CURRENCY_PAIR_LENGTH = 6
CURRENCY_CODE_LENGTH = 3
MIN_TRADE_AMOUNT = -(2**31)
MAX_TRADE_AMOUNT = 2**31 - 1
TRADES_TABLE_NAME = "trades"
CURRENCY_CODE_COLUMN_LENGTH = 3
PRICE_TEXT_LENGTH = 64
DEFAULT_DATABASE_URL = "sqlite:///trades.db"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SOURCE_ENCODING = "utf-8"
