"""Trade line readers for ingestion.

This module loads raw trade lines from local files, open text
streams, or S3 objects, preserving input order and blank lines.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, TextIO

from core.config import TradeflowConfig
from core.constants import SOURCE_ENCODING
from core.errors import TradeflowDependencyError, TradeflowIngestError
from core.logging_config import get_logger
from core.s3_uri import S3Location, parse_s3_uri

_LOGGER = get_logger(__name__)


def read_trade_lines(source_uri: str, config: TradeflowConfig) -> list[str]:
    """Load raw trade lines from a local file or S3 object.

    Args:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Ordered list of raw lines without line terminators.

    Raises:
        TradeflowIngestError: If source cannot be read.
    """
    if source_uri.startswith("s3://"):
        lines = _read_s3_lines(parse_s3_uri(source_uri), config)
    else:
        lines = _read_local_lines(Path(source_uri).expanduser())
    _LOGGER.info("trade_source_read", source_uri=source_uri, line_count=len(lines))
    return lines


def read_stream_lines(stream: TextIO) -> list[str]:
    """Read every line from an open text stream.

    Args:
        stream: Readable text stream positioned at the first trade line.

    Returns:
        Ordered list of raw lines without line terminators.
    """
    return [line.rstrip("\r\n") for line in stream]


def _read_local_lines(source_path: Path) -> list[str]:
    """Read lines from a local trade file.

    Raises:
        TradeflowIngestError: If path is missing, not a file, or unreadable.
    """
    if not source_path.is_file():
        raise TradeflowIngestError(
            f"Failed to read trades at {source_path}: file does not exist. "
            "Provide an existing trade file."
        )
    try:
        with source_path.open(encoding=SOURCE_ENCODING) as stream:
            return read_stream_lines(stream)
    except (OSError, UnicodeDecodeError) as error:
        raise TradeflowIngestError(
            f"Failed to read trades at {source_path}: {error}. "
            f"Check file permissions and {SOURCE_ENCODING} encoding."
        ) from error


def _read_s3_lines(location: S3Location, config: TradeflowConfig) -> list[str]:
    """Download one S3 object and split it into lines.

    Raises:
        TradeflowIngestError: If the object cannot be downloaded or decoded.
    """
    s3_client = _create_s3_client(config)
    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
        body = response["Body"].read().decode(SOURCE_ENCODING)
    except Exception as error:
        raise TradeflowIngestError(
            f"Failed to read trades at s3://{location.bucket}/{location.key}: {error}."
        ) from error
    return read_stream_lines(io.StringIO(body, newline=None))


def _create_s3_client(config: TradeflowConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        TradeflowDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise TradeflowDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install tradeflow[s3] to import from s3:// sources."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: TradeflowConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
