"""Shared typed data models for Concordancer.

This package contains the records and sort-key variants exchanged between the
builder, the sorter and the I/O boundary.
"""

from .datatypes import (
    BuildStats,
    Concordance,
    SortDirection,
    SortField,
    SortKey,
    WordStat,
)

__all__ = [
    "BuildStats",
    "Concordance",
    "SortDirection",
    "SortField",
    "SortKey",
    "WordStat",
]
