"""Tradeflow exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class TradeflowError(Exception):
    """Base exception for all Tradeflow failures."""


class TradeflowConfigError(TradeflowError):
    """Raised for invalid runtime configuration."""


class TradeflowIngestError(TradeflowError):
    """Raised when a trade source cannot be read."""


class TradeflowStoreError(TradeflowError):
    """Raised when a trade batch cannot be persisted or loaded."""


class TradeflowDependencyError(TradeflowError):
    """Raised when an optional runtime dependency is missing."""
