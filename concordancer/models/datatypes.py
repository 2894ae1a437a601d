"""Core datatypes shared across Concordancer modules.

Responsibilities:
- Represent per-word statistics records produced by the builder.
- Describe sort requests as an explicit tagged `(field, direction)` variant.

Key types:
- `WordStat`, `Concordance`, `BuildStats`, `SortField`, `SortDirection`,
  and `SortKey`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import UnsupportedSortKey


@dataclass(frozen=True, slots=True)
class WordStat:
    """Summary statistics for one distinct normalized word.

    Attributes:
        word: Normalized word text (lowercase, punctuation-free), unique key.
        count: Number of occurrences in the stream.
        first_position: 0-based index of the first occurrence among kept words.
        avg_distance: Mean gap between consecutive occurrences for words seen
            more than twice; the raw gap sum for words seen once or twice.
    """

    word: str
    count: int
    first_position: int
    avg_distance: int = 0


Concordance = list[WordStat]


@dataclass(frozen=True, slots=True)
class BuildStats:
    """Token bookkeeping for one concordance build pass.

    Attributes:
        tokens_read: Whitespace-delimited tokens consumed from the source.
        tokens_kept: Tokens that contributed to a word record.
        tokens_discarded: Tokens that normalized to an empty string.
        tokens_ignored: Tokens whose normalized form is in the ignore-set.
        unique_words: Number of distinct records in the concordance.
    """

    tokens_read: int = 0
    tokens_kept: int = 0
    tokens_discarded: int = 0
    tokens_ignored: int = 0
    unique_words: int = 0


class SortField(str, Enum):
    """Concordance fields available for sorting, keyed by their CLI names."""

    WORD = "word"
    COUNT = "count"
    FIRST_POSITION = "fstPosition"
    AVG_DISTANCE = "avgDistance"

    @property
    def attribute(self) -> str:
        """Return the `WordStat` attribute compared for this field."""

        return _FIELD_ATTRIBUTES[self]


_FIELD_ATTRIBUTES = {
    SortField.WORD: "word",
    SortField.COUNT: "count",
    SortField.FIRST_POSITION: "first_position",
    SortField.AVG_DISTANCE: "avg_distance",
}


class SortDirection(str, Enum):
    """Sort order for a concordance field."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortKey:
    """A supported `(field, direction)` sort request."""

    field: SortField
    direction: SortDirection

    @classmethod
    def parse(cls, field: str, direction: str) -> SortKey:
        """Build a sort key from textual field and direction names.

        Raises:
            UnsupportedSortKey: If either value is outside the supported sets.
        """

        field_text = str(field).strip()
        direction_text = str(direction).strip()
        try:
            parsed_field = SortField(field_text)
        except ValueError as exc:
            supported = ", ".join(member.value for member in SortField)
            raise UnsupportedSortKey(
                field=field_text,
                direction=direction_text,
                detail=f"Unknown field to sort: `{field_text}`; supported: {supported}.",
            ) from exc
        try:
            parsed_direction = SortDirection(direction_text)
        except ValueError as exc:
            supported = ", ".join(member.value for member in SortDirection)
            raise UnsupportedSortKey(
                field=field_text,
                direction=direction_text,
                detail=f"Unknown sort type: `{direction_text}`; supported: {supported}.",
            ) from exc
        return cls(field=parsed_field, direction=parsed_direction)

    @property
    def label(self) -> str:
        """Return the `field direction` label used in diagnostics."""

        return f"{self.field.value} {self.direction.value}"
