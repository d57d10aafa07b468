"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


class RecordingLogger:
    """Structured logger double that keeps emitted events in memory."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, object]]] = []

    def debug(self, event: str, **fields: object) -> None:
        self.events.append(("debug", event, fields))

    def info(self, event: str, **fields: object) -> None:
        self.events.append(("info", event, fields))

    def warning(self, event: str, **fields: object) -> None:
        self.events.append(("warning", event, fields))

    def error(self, event: str, **fields: object) -> None:
        self.events.append(("error", event, fields))

    def of_level(self, level: str) -> list[tuple[str, dict[str, object]]]:
        """Return (event, fields) pairs emitted at one level."""
        return [
            (event, fields) for event_level, event, fields in self.events if event_level == level
        ]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Fresh in-memory logger for diagnostic assertions."""
    return RecordingLogger()


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """SQLite database URL inside the test temp directory."""
    return f"sqlite:///{tmp_path / 'trades.db'}"


@pytest.fixture(autouse=True)
def _clear_tradeflow_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host TRADEFLOW_* variables out of config parsing."""
    for variable_name in (
        "TRADEFLOW_DATABASE_URL",
        "TRADEFLOW_LOG_LEVEL",
        "TRADEFLOW_CREATE_SCHEMA",
        "TRADEFLOW_S3_REGION",
        "TRADEFLOW_S3_PROFILE",
    ):
        monkeypatch.delenv(variable_name, raising=False)
