"""Runtime configuration model for Tradeflow.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_DATABASE_URL, DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import TradeflowConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class TradeflowConfig:
    """Validated runtime configuration.

    Attributes:
        database_url: SQLAlchemy URL of the trade store.
        log_level: Minimum level for emitted log events.
        create_schema: Create the trades table when it is missing.
        s3_region: Optional default AWS region for S3 sources.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    database_url: str
    log_level: str
    create_schema: bool
    s3_region: str | None
    s3_profile: str | None

    @classmethod
    def from_env(cls) -> "TradeflowConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TradeflowConfigError: If environment values are invalid.
        """
        database_url = os.getenv("TRADEFLOW_DATABASE_URL", DEFAULT_DATABASE_URL).strip()
        if not database_url:
            raise TradeflowConfigError(
                "Invalid TRADEFLOW_DATABASE_URL value: expected a SQLAlchemy URL, got ''. "
                "Unset it to use the default SQLite database."
            )
        log_level = _parse_log_level(os.getenv("TRADEFLOW_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        create_schema = _parse_bool(
            "TRADEFLOW_CREATE_SCHEMA", os.getenv("TRADEFLOW_CREATE_SCHEMA", "true")
        )
        return cls(
            database_url=database_url,
            log_level=log_level,
            create_schema=create_schema,
            s3_region=os.getenv("TRADEFLOW_S3_REGION"),
            s3_profile=os.getenv("TRADEFLOW_S3_PROFILE"),
        )


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-case level name.

    Raises:
        TradeflowConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise TradeflowConfigError(
            "Invalid TRADEFLOW_LOG_LEVEL value: "
            f"expected one of {SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return level


def _parse_bool(variable_name: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Raises:
        TradeflowConfigError: If value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise TradeflowConfigError(
        f"Invalid {variable_name} value: expected true/false, got '{raw_value}'. "
        f"Set {variable_name} to one of {_TRUE_VALUES + _FALSE_VALUES}."
    )
