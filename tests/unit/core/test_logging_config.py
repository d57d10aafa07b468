"""Unit tests for structured logging setup."""

from __future__ import annotations

import json

import structlog

from core.logging_config import configure_logging, get_logger


def test_configured_logger_writes_json_events_to_stderr(capsys) -> None:
    """Configured loggers should render JSON events on stderr only."""
    configure_logging("INFO")

    get_logger("tests.logging").info("trades_processed", trade_count=2)
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip().splitlines()[-1])

    assert captured.out == ""
    assert (payload["event"], payload["trade_count"], payload["level"]) == (
        "trades_processed",
        2,
        "info",
    )


def test_configured_level_filters_lower_events(capsys) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("WARNING")

    get_logger("tests.logging").info("trades_processed", trade_count=2)
    captured = capsys.readouterr()
    configure_logging("INFO")

    assert captured.err == ""


def test_get_logger_configures_json_stderr_when_unconfigured(capsys) -> None:
    """Library use without configure_logging should still log JSON to stderr."""
    structlog.reset_defaults()

    get_logger("tests.logging").warning("trade_line_rejected", line_number=3)
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip().splitlines()[-1])

    assert structlog.is_configured() is True
    assert captured.out == ""
    assert (payload["event"], payload["line_number"]) == ("trade_line_rejected", 3)
