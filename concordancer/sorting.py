"""Field-polymorphic concordance sorting.

Responsibilities:
- Enumerate every supported `(field, direction)` sort key.
- Dispatch a tagged `SortKey` to a three-way comparator.
- Expose a fallible `sort_concordance` entry point that never partially sorts.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import cmp_to_key
from operator import attrgetter

from .errors import UnsupportedSortKey
from .models.datatypes import Concordance, SortDirection, SortField, SortKey, WordStat

Comparator = Callable[[WordStat, WordStat], int]


@dataclass(frozen=True, slots=True)
class SortOutcome:
    """Result of a sort request: the concordance, or the reason it was refused.

    Attributes:
        concordance: The sorted concordance, or the untouched input on failure.
        key: Resolved sort key, `None` on failure.
        error: Unsupported sort key error, `None` on success.
    """

    concordance: Concordance
    key: SortKey | None = None
    error: UnsupportedSortKey | None = None

    @property
    def ok(self) -> bool:
        """Return whether the sort request was applied."""

        return self.error is None

    def unwrap(self) -> Concordance:
        """Return the sorted concordance or raise the carried error."""

        if self.error is not None:
            raise self.error
        return self.concordance


def supported_sort_keys() -> tuple[SortKey, ...]:
    """Return all supported sort keys in field-then-direction order."""

    return tuple(
        SortKey(field=field, direction=direction)
        for field in SortField
        for direction in SortDirection
    )


def comparator_for(key: SortKey) -> Comparator:
    """Return the three-way comparator for one tagged sort key."""

    value_of = attrgetter(key.field.attribute)

    if key.direction is SortDirection.ASC:

        def compare(left: WordStat, right: WordStat) -> int:
            left_value, right_value = value_of(left), value_of(right)
            if left_value < right_value:
                return -1
            if right_value < left_value:
                return 1
            return 0

    else:

        def compare(left: WordStat, right: WordStat) -> int:
            left_value, right_value = value_of(left), value_of(right)
            if left_value > right_value:
                return -1
            if right_value > left_value:
                return 1
            return 0

    compare.__name__ = f"compare_{key.field.attribute}_{key.direction.value}"
    return compare


def sort_by_key(concordance: Concordance, key: SortKey) -> Concordance:
    """Sort `concordance` in place by `key` and return the same list."""

    concordance.sort(key=cmp_to_key(comparator_for(key)))
    return concordance


def sort_concordance(
    concordance: Concordance,
    field: str = "word",
    direction: str = "asc",
) -> SortOutcome:
    """Sort `concordance` in place by textual field and direction names.

    Unsupported combinations leave the concordance untouched and are reported
    through `SortOutcome.error`.
    """

    try:
        key = SortKey.parse(field, direction)
    except UnsupportedSortKey as exc:
        return SortOutcome(concordance=concordance, error=exc)
    return SortOutcome(concordance=sort_by_key(concordance, key), key=key)
