"""Unit tests for tagged sort-key dispatch and concordance sorting."""

from __future__ import annotations

import pytest

from concordancer.errors import UnsupportedSortKey
from concordancer.models.datatypes import SortDirection, SortField, SortKey, WordStat
from concordancer.sorting import (
    comparator_for,
    sort_by_key,
    sort_concordance,
    supported_sort_keys,
)


def _sample_concordance() -> list[WordStat]:
    """Return a small unsorted concordance with distinct values per field."""

    return [
        WordStat(word="pear", count=3, first_position=4, avg_distance=2),
        WordStat(word="apple", count=1, first_position=0, avg_distance=0),
        WordStat(word="fig", count=2, first_position=1, avg_distance=5),
    ]


def test_sort_by_count_desc_orders_counts_from_highest() -> None:
    """Counts `[3, 1, 2]` should become `[3, 2, 1]` for `count desc`."""

    outcome = sort_concordance(_sample_concordance(), "count", "desc")

    assert outcome.ok
    assert [record.count for record in outcome.concordance] == [3, 2, 1]


@pytest.mark.parametrize(
    ("field", "direction", "expected_words"),
    [
        ("word", "asc", ["apple", "fig", "pear"]),
        ("word", "desc", ["pear", "fig", "apple"]),
        ("count", "asc", ["apple", "fig", "pear"]),
        ("fstPosition", "asc", ["apple", "fig", "pear"]),
        ("fstPosition", "desc", ["pear", "fig", "apple"]),
        ("avgDistance", "asc", ["apple", "pear", "fig"]),
        ("avgDistance", "desc", ["fig", "pear", "apple"]),
    ],
)
def test_sort_concordance_orders_by_each_field(
    field: str, direction: str, expected_words: list[str]
) -> None:
    """Every supported field should sort in both directions."""

    outcome = sort_concordance(_sample_concordance(), field, direction)

    assert [record.word for record in outcome.unwrap()] == expected_words


def test_sort_concordance_mutates_and_returns_same_list() -> None:
    """Sorting should happen in place on the caller's list."""

    concordance = _sample_concordance()

    outcome = sort_concordance(concordance, "word", "asc")

    assert outcome.concordance is concordance
    assert outcome.key == SortKey(field=SortField.WORD, direction=SortDirection.ASC)
    assert [record.word for record in concordance] == ["apple", "fig", "pear"]


def test_sort_concordance_defaults_to_word_ascending() -> None:
    """Omitted field and direction should sort by word ascending."""

    outcome = sort_concordance(_sample_concordance())

    assert [record.word for record in outcome.concordance] == ["apple", "fig", "pear"]


def test_sort_is_idempotent() -> None:
    """Sorting an already sorted concordance by the same key should not change it."""

    concordance = _sample_concordance() + [
        WordStat(word="kiwi", count=2, first_position=7, avg_distance=5),
    ]
    key = SortKey.parse("avgDistance", "desc")

    once = list(sort_by_key(concordance, key))
    twice = sort_by_key(concordance, key)

    assert twice == once


def test_word_sort_is_monotonic_by_code_point() -> None:
    """Word sorting should compare code points, so uppercase-free words order naturally."""

    concordance = [
        WordStat(word=word, count=1, first_position=index)
        for index, word in enumerate(["b", "ab", "a", "über", "z", "aa"])
    ]

    ascending = [record.word for record in sort_by_key(concordance, SortKey.parse("word", "asc"))]
    assert ascending == sorted(ascending)
    assert ascending[-1] == "über"

    descending = [
        record.word for record in sort_by_key(concordance, SortKey.parse("word", "desc"))
    ]
    assert descending == sorted(descending, reverse=True)


def test_unknown_field_returns_error_outcome_without_sorting() -> None:
    """Unsupported fields should be reported through the outcome and leave input untouched."""

    concordance = _sample_concordance()
    before = list(concordance)

    outcome = sort_concordance(concordance, "length", "asc")

    assert not outcome.ok
    assert outcome.key is None
    assert isinstance(outcome.error, UnsupportedSortKey)
    assert outcome.error.field == "length"
    assert outcome.error.direction == "asc"
    assert concordance == before
    with pytest.raises(UnsupportedSortKey, match=r"Unknown field to sort: `length`"):
        outcome.unwrap()


def test_unknown_direction_returns_error_outcome() -> None:
    """Unsupported directions should be rejected with the offending value."""

    outcome = sort_concordance(_sample_concordance(), "count", "up")

    assert outcome.error is not None
    assert outcome.error.direction == "up"
    assert "Unknown sort type: `up`" in str(outcome.error)


def test_sort_key_parse_accepts_padded_names_and_rejects_case_variants() -> None:
    """Field and direction names should match exactly after trimming."""

    assert SortKey.parse(" count ", "desc ").label == "count desc"
    with pytest.raises(UnsupportedSortKey):
        SortKey.parse("Count", "desc")
    with pytest.raises(UnsupportedSortKey):
        SortKey.parse("count", "DESC")


def test_supported_sort_keys_enumerates_every_field_and_direction() -> None:
    """All field/direction combinations should be available."""

    labels = [key.label for key in supported_sort_keys()]

    assert labels == [
        "word asc",
        "word desc",
        "count asc",
        "count desc",
        "fstPosition asc",
        "fstPosition desc",
        "avgDistance asc",
        "avgDistance desc",
    ]


def test_comparator_for_returns_three_way_results() -> None:
    """Comparators should return negative, zero or positive like classic cmp functions."""

    low = WordStat(word="a", count=1, first_position=0)
    high = WordStat(word="b", count=5, first_position=1)

    ascending = comparator_for(SortKey.parse("count", "asc"))
    descending = comparator_for(SortKey.parse("count", "desc"))

    assert ascending(low, high) == -1
    assert ascending(high, low) == 1
    assert ascending(low, low) == 0
    assert descending(low, high) == 1
    assert descending(high, low) == -1
    assert descending(high, high) == 0
    assert ascending.__name__ == "compare_count_asc"
