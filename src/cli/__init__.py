"""Command-line interface for trade imports."""
