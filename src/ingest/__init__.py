"""Trade file ingestion pipeline.

This module reads raw trade lines, validates and maps them,
and hands the resulting trade batch to the store layer.
"""
