"""SQLAlchemy-backed trade store.

This module maps trade records onto the ``trades`` table and writes
each batch in a single transaction scoped to the write call.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from sqlalchemy import Column, Float, Integer, Numeric, String, create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.types import TypeDecorator

from core.config import TradeflowConfig
from core.constants import (
    CURRENCY_CODE_COLUMN_LENGTH,
    PRICE_TEXT_LENGTH,
    TRADES_TABLE_NAME,
)
from core.errors import TradeflowStoreError
from core.logging_config import get_logger
from core.types import TradeRecord

_LOGGER = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for trade store models."""


class ExactDecimal(TypeDecorator):
    """Decimal column that never rounds.

    PostgreSQL stores an unbounded NUMERIC. Other backends store the
    decimal text, since their decimal types are either float-backed or
    need a fixed precision and scale.
    """

    impl = String(PRICE_TEXT_LENGTH)
    cache_ok = True

    def load_dialect_impl(self, dialect: Any) -> Any:
        if dialect.name == "postgresql":
            return dialect.type_descriptor(Numeric(asdecimal=True))
        return dialect.type_descriptor(String(PRICE_TEXT_LENGTH))

    def process_bind_param(self, value: Decimal | None, dialect: Any) -> Any:
        if value is None or dialect.name == "postgresql":
            return value
        return str(value)

    def process_result_value(self, value: Any, dialect: Any) -> Decimal | None:
        if value is None:
            return None
        return value if isinstance(value, Decimal) else Decimal(value)


class TradeModel(Base):
    """Stored trade row."""

    __tablename__ = TRADES_TABLE_NAME

    id = Column(Integer, primary_key=True, autoincrement=True)
    source_currency = Column(String(CURRENCY_CODE_COLUMN_LENGTH), nullable=False)
    destination_currency = Column(String(CURRENCY_CODE_COLUMN_LENGTH), nullable=False)
    lots = Column(Float, nullable=False)
    price = Column(ExactDecimal(), nullable=False)


class SqlTradeStore:
    """Relational trade sink.

    Each ``write_batch`` call opens its own session, commits the whole
    batch once, and closes the session on every exit path.
    """

    def __init__(self, database_url: str, engine: Any | None = None) -> None:
        """Create a store bound to a database URL.

        Args:
            database_url: SQLAlchemy database URL.
            engine: Optional pre-built engine, mainly for tests.

        Raises:
            TradeflowStoreError: If the URL cannot be turned into an engine.
        """
        self._database_url = database_url
        self._engine = engine or _create_engine(database_url)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_config(cls, config: TradeflowConfig) -> "SqlTradeStore":
        """Build a store from runtime config, creating the schema if enabled."""
        store = cls(config.database_url)
        if config.create_schema:
            store.create_schema()
        return store

    def create_schema(self) -> None:
        """Create the trades table when it does not exist yet.

        Raises:
            TradeflowStoreError: If the table cannot be created.
        """
        try:
            Base.metadata.create_all(self._engine, checkfirst=True)
        except SQLAlchemyError as error:
            raise TradeflowStoreError(
                f"Failed to create table '{TRADES_TABLE_NAME}': {error}."
            ) from error

    def write_batch(self, trades: Sequence[TradeRecord]) -> int:
        """Persist a trade batch in one transaction.

        Args:
            trades: Ordered trade batch.

        Returns:
            Number of trades written.

        Raises:
            TradeflowStoreError: If the transaction fails; nothing is committed.
        """
        _LOGGER.info("trade_store_connecting", table=TRADES_TABLE_NAME)
        session = self._session_factory()
        try:
            with session.begin():
                session.add_all([_trade_to_model(trade) for trade in trades])
        except SQLAlchemyError as error:
            raise TradeflowStoreError(
                f"Failed to store {len(trades)} trades: {error}. "
                "No trades from this batch were committed."
            ) from error
        finally:
            session.close()
        _LOGGER.info("trades_stored", table=TRADES_TABLE_NAME, trade_count=len(trades))
        return len(trades)

    def load_trades(self, limit: int | None = None) -> list[TradeRecord]:
        """Load stored trades in insertion order.

        Args:
            limit: Optional maximum number of rows.

        Returns:
            Stored trade records.

        Raises:
            TradeflowStoreError: If the query fails.
        """
        statement = select(TradeModel).order_by(TradeModel.id)
        if limit is not None:
            statement = statement.limit(limit)
        session = self._session_factory()
        try:
            rows = session.scalars(statement).all()
        except SQLAlchemyError as error:
            raise TradeflowStoreError(f"Failed to load trades: {error}.") from error
        finally:
            session.close()
        return [_trade_from_model(row) for row in rows]

    def dispose(self) -> None:
        """Release pooled database connections."""
        self._engine.dispose()


def _create_engine(database_url: str) -> Any:
    """Create a SQLAlchemy engine for a URL.

    Raises:
        TradeflowStoreError: If the URL is invalid or its driver is missing.
    """
    try:
        return create_engine(database_url, pool_pre_ping=True)
    except (SQLAlchemyError, ImportError) as error:
        raise TradeflowStoreError(
            f"Invalid database URL '{database_url}': {error}. "
            "Set TRADEFLOW_DATABASE_URL to a supported SQLAlchemy URL."
        ) from error


def _trade_to_model(trade: TradeRecord) -> TradeModel:
    return TradeModel(
        source_currency=trade.source_currency,
        destination_currency=trade.destination_currency,
        lots=trade.lots,
        price=trade.price,
    )


def _trade_from_model(row: TradeModel) -> TradeRecord:
    return TradeRecord(
        source_currency=row.source_currency,
        destination_currency=row.destination_currency,
        lots=float(row.lots),
        price=row.price,
    )
