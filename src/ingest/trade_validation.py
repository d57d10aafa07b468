"""Per-line trade field validation.

This module checks split trade fields against the file format rules
and reports the first failed rule with its line number and raw value.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from core.constants import (
    CURRENCY_PAIR_LENGTH,
    MAX_TRADE_AMOUNT,
    MIN_TRADE_AMOUNT,
    TRADE_FIELD_COUNT,
)
from core.types import TradeFieldIssue

_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
_DECIMAL_PATTERN = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)\s*")


def find_trade_field_issue(fields: Sequence[str], line_number: int) -> TradeFieldIssue | None:
    """Return the first validation failure for split trade fields.

    Checks run in order and stop at the first failure: field count,
    currency pair length, integer amount, decimal price.

    Args:
        fields: Line split on the field delimiter.
        line_number: One-based line position used in diagnostics.

    Returns:
        Issue describing the failure, or None when all checks pass.
    """
    if len(fields) != TRADE_FIELD_COUNT:
        return TradeFieldIssue(
            line_number=line_number,
            reason="field_count",
            value=str(len(fields)),
            message=f"Line {line_number} malformed. Only {len(fields)} field(s) found.",
        )
    currency_pair, trade_amount, trade_price = fields
    if len(currency_pair) != CURRENCY_PAIR_LENGTH:
        return TradeFieldIssue(
            line_number=line_number,
            reason="currency_pair",
            value=currency_pair,
            message=f"Trade currencies on line {line_number} malformed: '{currency_pair}'",
        )
    if not is_trade_amount(trade_amount):
        return TradeFieldIssue(
            line_number=line_number,
            reason="trade_amount",
            value=trade_amount,
            message=f"Trade amount on line {line_number} not a valid integer: '{trade_amount}'",
        )
    if not is_trade_price(trade_price):
        return TradeFieldIssue(
            line_number=line_number,
            reason="trade_price",
            value=trade_price,
            message=f"Trade price on line {line_number} not a valid decimal: '{trade_price}'",
        )
    return None


def validate_trade_fields(
    fields: Sequence[str],
    line_number: int,
    logger: Any,
    rejected: list[TradeFieldIssue] | None = None,
) -> bool:
    """Validate split trade fields and log one warning on failure.

    Args:
        fields: Line split on the field delimiter.
        line_number: One-based line position used in diagnostics.
        logger: Structured logger receiving the warning.
        rejected: Optional list that receives the issue on failure.

    Returns:
        True when every check passes.
    """
    issue = find_trade_field_issue(fields, line_number)
    if issue is None:
        return True
    _log_trade_field_issue(issue, logger)
    if rejected is not None:
        rejected.append(issue)
    return False


def _log_trade_field_issue(issue: TradeFieldIssue, logger: Any) -> None:
    """Emit the warning event for a rejected line."""
    logger.warning(
        "trade_line_rejected",
        line_number=issue.line_number,
        reason=issue.reason,
        value=issue.value,
        detail=issue.message,
    )


def is_trade_amount(raw_value: str) -> bool:
    """Return whether a raw amount is a signed 32-bit integer literal."""
    if _INTEGER_PATTERN.fullmatch(raw_value) is None:
        return False
    return MIN_TRADE_AMOUNT <= int(raw_value) <= MAX_TRADE_AMOUNT


def is_trade_price(raw_value: str) -> bool:
    """Return whether a raw price is a plain decimal literal."""
    return _DECIMAL_PATTERN.fullmatch(raw_value) is not None
