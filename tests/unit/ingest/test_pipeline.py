"""Unit tests for trade parsing and batch processing."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

import pytest

from core.errors import TradeflowStoreError
from core.types import TradeRecord
from ingest.pipeline import parse_trades, process_trades


class _ListSink:
    """Sink double that records each batch it receives."""

    def __init__(self) -> None:
        self.batches: list[list[TradeRecord]] = []

    def write_batch(self, trades: Sequence[TradeRecord]) -> int:
        self.batches.append(list(trades))
        return len(trades)


class _FailingSink:
    def write_batch(self, trades: Sequence[TradeRecord]) -> int:
        raise TradeflowStoreError("commit failed")


def test_parse_trades_maps_single_valid_line(recording_logger) -> None:
    """One valid line should produce one normalized trade and no warnings."""
    result = parse_trades(["GBPUSD,1000,1.51"], recording_logger)

    assert result.trades == (
        TradeRecord(
            source_currency="GBP",
            destination_currency="USD",
            lots=0.01,
            price=Decimal("1.51"),
        ),
    )
    assert recording_logger.of_level("warning") == []


@pytest.mark.parametrize(
    ("line", "reason", "value"),
    [
        ("GBPUSD,1000", "field_count", "2"),
        ("GBPUSD,1000,1.51,x", "field_count", "4"),
        ("GBPUSDX,1000,1.51", "currency_pair", "GBPUSDX"),
        ("GBPUSD,abc,1.51", "trade_amount", "abc"),
        ("GBPUSD,1000,one", "trade_price", "one"),
    ],
)
def test_parse_trades_drops_invalid_line_with_one_warning(
    recording_logger,
    line: str,
    reason: str,
    value: str,
) -> None:
    """Each malformed line should be dropped after exactly one warning."""
    result = parse_trades([line], recording_logger)
    warnings = recording_logger.of_level("warning")

    assert result.trades == ()
    assert len(warnings) == 1
    assert (warnings[0][1]["line_number"], warnings[0][1]["reason"], warnings[0][1]["value"]) == (
        1,
        reason,
        value,
    )


def test_parse_trades_keeps_order_around_bad_line(recording_logger) -> None:
    """Valid trades should keep source order when a bad line sits between them."""
    lines = ["GBPUSD,1000,1.51", "bad", "EURJPY,2000,110.25"]

    result = parse_trades(lines, recording_logger)
    warnings = recording_logger.of_level("warning")

    assert [(trade.source_currency, trade.destination_currency) for trade in result.trades] == [
        ("GBP", "USD"),
        ("EUR", "JPY"),
    ]
    assert result.trades[1].lots == 0.02
    assert result.trades[1].price == Decimal("110.25")
    assert [fields["line_number"] for _, fields in warnings] == [2]
    assert warnings[0][1]["value"] == "1"


def test_parse_trades_reports_true_line_numbers_after_rejections(recording_logger) -> None:
    """Line numbers should track input position, not the count of valid trades."""
    lines = ["bad", "also bad", "GBPUSD,1000,1.51", "GBPUSD,x,1.51"]

    result = parse_trades(lines, recording_logger)

    assert [issue.line_number for issue in result.issues] == [1, 2, 4]
    assert result.line_count == 4


def test_parse_trades_treats_blank_line_as_malformed(recording_logger) -> None:
    """A blank line should be rejected as a one-field record."""
    result = parse_trades(["", "GBPUSD,1000,1.51"], recording_logger)

    assert len(result.trades) == 1
    assert result.issues[0].message == "Line 1 malformed. Only 1 field(s) found."


def test_parse_trades_is_repeatable(recording_logger) -> None:
    """Parsing the same lines twice should yield identical trades."""
    lines = ["GBPUSD,1000,1.51", "EURJPY,2000,110.25", "broken,line"]

    assert parse_trades(lines, recording_logger).trades == parse_trades(lines).trades


def test_process_trades_summarizes_then_writes_once(recording_logger) -> None:
    """The sink should get the full ordered batch in a single call."""
    sink = _ListSink()
    lines = ["GBPUSD,1000,1.51", "bad", "EURJPY,2000,110.25"]

    result = process_trades(lines, sink, recording_logger)
    infos = recording_logger.of_level("info")

    assert len(sink.batches) == 1
    assert [trade.source_currency for trade in sink.batches[0]] == ["GBP", "EUR"]
    assert infos == [
        ("trades_processed", {"trade_count": 2, "rejected_count": 1, "line_count": 3})
    ]
    assert (result.trade_count, result.rejected_count, result.stored) == (2, 1, True)


def test_process_trades_writes_empty_batch_for_empty_input(recording_logger) -> None:
    """An empty source should still complete and report zero trades."""
    sink = _ListSink()

    result = process_trades([], sink, recording_logger)

    assert sink.batches == [[]]
    assert (result.line_count, result.trade_count) == (0, 0)


def test_process_trades_without_sink_skips_storage(recording_logger) -> None:
    """Passing no sink should parse only."""
    result = process_trades(["GBPUSD,1000,1.51"], None, recording_logger)

    assert (result.trade_count, result.stored) == (1, False)


def test_process_trades_propagates_sink_failure(recording_logger) -> None:
    """Sink failures should abort the run."""
    with pytest.raises(TradeflowStoreError):
        process_trades(["GBPUSD,1000,1.51"], _FailingSink(), recording_logger)
