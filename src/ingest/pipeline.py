"""Trade import orchestration.

This module coordinates line reading, per-line validation and mapping,
and the single batch write that makes a run's trades durable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from core.config import TradeflowConfig
from core.constants import FIELD_DELIMITER
from core.logging_config import get_logger
from core.types import ImportOptions, ImportResult, TradeFieldIssue, TradeRecord
from ingest.input_reader import read_trade_lines
from ingest.trade_mapping import map_trade_fields
from ingest.trade_validation import validate_trade_fields
from store.trade_sink import TradeSink
from store.trade_store import SqlTradeStore

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class TradeParseResult:
    """Outcome of parsing every input line.

    Attributes:
        trades: Valid trades in source line order.
        issues: One issue per rejected line, in source line order.
        line_count: Number of lines considered.
    """

    trades: tuple[TradeRecord, ...]
    issues: tuple[TradeFieldIssue, ...]
    line_count: int


def parse_trades(lines: Iterable[str], logger: Any | None = None) -> TradeParseResult:
    """Validate and map raw lines, dropping malformed ones.

    Line numbers are the true one-based position of each line in the
    input, including lines that were rejected before it.

    Args:
        lines: Ordered raw trade lines.
        logger: Structured logger for rejection warnings.

    Returns:
        Parsed trades, rejection issues, and the number of lines seen.
    """
    log = logger or _LOGGER
    trades: list[TradeRecord] = []
    issues: list[TradeFieldIssue] = []
    line_count = 0
    for line_number, line in enumerate(lines, 1):
        line_count = line_number
        fields = line.split(FIELD_DELIMITER)
        if not validate_trade_fields(fields, line_number, log, issues):
            continue
        trades.append(map_trade_fields(fields))
    return TradeParseResult(trades=tuple(trades), issues=tuple(issues), line_count=line_count)


def process_trades(
    lines: Iterable[str],
    sink: TradeSink | None,
    logger: Any | None = None,
) -> ImportResult:
    """Parse lines and hand the valid trades to a sink in one call.

    Args:
        lines: Ordered raw trade lines.
        sink: Batch destination; ``None`` parses without storing.
        logger: Structured logger for diagnostics.

    Returns:
        Import summary for the run.

    Raises:
        TradeflowStoreError: If the sink fails to commit the batch.
    """
    log = logger or _LOGGER
    parsed = parse_trades(lines, log)
    log.info(
        "trades_processed",
        trade_count=len(parsed.trades),
        rejected_count=len(parsed.issues),
        line_count=parsed.line_count,
    )
    if sink is not None:
        sink.write_batch(list(parsed.trades))
    return ImportResult(
        line_count=parsed.line_count,
        trade_count=len(parsed.trades),
        rejected_count=len(parsed.issues),
        stored=sink is not None,
    )


class TradeImportRunner:
    """Runner for one trade import invocation."""

    def __init__(
        self,
        options: ImportOptions,
        config: TradeflowConfig,
        sink: TradeSink | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._sink = sink

    def run(self) -> ImportResult:
        """Read the source, parse it, and store the batch unless dry-run."""
        lines = read_trade_lines(self._options.source_uri, self._config)
        result = process_trades(lines, self._resolve_sink())
        _log_import_completion(self._options, result)
        return result

    def _resolve_sink(self) -> TradeSink | None:
        if self._options.dry_run:
            return None
        if self._sink is None:
            self._sink = SqlTradeStore.from_config(self._config)
        return self._sink


def import_trades(
    options: ImportOptions,
    config: TradeflowConfig,
    sink: TradeSink | None = None,
) -> ImportResult:
    """Run the trade import pipeline for one source.

    Args:
        options: Import request options.
        config: Runtime configuration.
        sink: Optional sink; the configured SQL store is used when omitted.

    Returns:
        Import summary for the run.

    Raises:
        TradeflowIngestError: If the source cannot be read.
        TradeflowStoreError: If the batch cannot be persisted.
    """
    runner = TradeImportRunner(options, config, sink)
    return runner.run()


def _log_import_completion(options: ImportOptions, result: ImportResult) -> None:
    """Log run completion with contextual metadata."""
    _LOGGER.info(
        "import_completed",
        source_uri=options.source_uri,
        dry_run=options.dry_run,
        line_count=result.line_count,
        trade_count=result.trade_count,
        rejected_count=result.rejected_count,
        stored=result.stored,
    )
