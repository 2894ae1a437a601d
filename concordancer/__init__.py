"""Top-level package for Concordancer.

This package builds word-occurrence concordances from text streams: per
distinct normalized word it records occurrence count, first position and
average inter-occurrence distance, then sorts the records by a chosen field.
The main entry points are `build_concordance` and `sort_concordance`.
"""

from .builder import ConcordanceBuilder, build_concordance
from .errors import ConcordanceStageError, UnsupportedSortKey
from .models.datatypes import Concordance, SortDirection, SortField, SortKey, WordStat
from .sorting import SortOutcome, sort_by_key, sort_concordance

__all__ = [
    "Concordance",
    "ConcordanceBuilder",
    "ConcordanceStageError",
    "SortDirection",
    "SortField",
    "SortKey",
    "SortOutcome",
    "UnsupportedSortKey",
    "WordStat",
    "__version__",
    "build_concordance",
    "sort_by_key",
    "sort_concordance",
]

__version__ = "0.1.0"
