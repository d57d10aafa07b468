"""Mapping of validated trade fields onto trade records."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from core.constants import CURRENCY_CODE_LENGTH, CURRENCY_PAIR_LENGTH, LOT_SIZE
from core.types import TradeRecord


def map_trade_fields(fields: Sequence[str]) -> TradeRecord:
    """Convert validated trade fields into a trade record.

    Args:
        fields: Currency pair, integer amount, and decimal price fields
            that already passed ``find_trade_field_issue``.

    Returns:
        Normalized trade record.
    """
    currency_pair, trade_amount, trade_price = fields
    return TradeRecord(
        source_currency=currency_pair[:CURRENCY_CODE_LENGTH],
        destination_currency=currency_pair[CURRENCY_CODE_LENGTH:CURRENCY_PAIR_LENGTH],
        lots=int(trade_amount) / LOT_SIZE,
        price=Decimal(trade_price.strip()),
    )
