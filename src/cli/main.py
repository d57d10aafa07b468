"""Tradeflow CLI entry points.
This module exposes commands for importing and listing trades.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any, Sequence

from core.config import TradeflowConfig
from core.logging_config import configure_logging
from core.types import ImportOptions
from store.trade_sdk import TradeflowClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="tradeflow", description="Currency trade importer")
    parser.add_argument("--database-url", help="Override TRADEFLOW_DATABASE_URL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_import_command(subparsers)
    _add_list_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Tradeflow CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.database_url)
    configure_logging(config.log_level)
    client = TradeflowClient(config)
    try:
        if args.command == "import":
            return _run_import_command(client, args)
        if args.command == "list":
            return _run_list_command(client, args)
    finally:
        client.close()
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(database_url: str | None) -> TradeflowConfig:
    """Build config with optional database URL override."""
    config = TradeflowConfig.from_env()
    if database_url:
        config = replace(config, database_url=database_url)
    return config


def _run_import_command(client: TradeflowClient, args: argparse.Namespace) -> int:
    """Handle import command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = ImportOptions(source_uri=args.source, dry_run=args.dry_run)
    result = client.import_file(options)
    print(f"lines_read={result.line_count}")
    print(f"trades_imported={result.trade_count}")
    print(f"lines_rejected={result.rejected_count}")
    print(f"stored={str(result.stored).lower()}")
    return 0


def _run_list_command(client: TradeflowClient, args: argparse.Namespace) -> int:
    """Handle list command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    for trade in client.list_trades(args.limit):
        print(
            f"{trade.source_currency}\t"
            f"{trade.destination_currency}\t"
            f"{trade.lots}\t"
            f"{trade.price.normalize():f}"
        )
    return 0


def _add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser("import", help="Import a trade file or s3://bucket/key object")
    parser.add_argument("source", help="Trade file path or s3://bucket/key")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and parse without writing to the database",
    )


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    parser = subparsers.add_parser("list", help="List stored trades")
    parser.add_argument("--limit", type=int, help="Maximum number of trades to print")
