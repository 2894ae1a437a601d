"""Shared parsing helpers for CLI, environment and config-file values."""

from __future__ import annotations

from collections.abc import Iterable


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def split_word_list(values: str | Iterable[object] | None) -> tuple[str, ...]:
    """Split whitespace-separated word lists into individual words.

    Accepts one string (`"the a an"`) or an iterable of such strings, as given
    by a repeatable CLI option or a YAML list. Order is preserved and blank
    entries are dropped.
    """

    if values is None:
        return ()
    if isinstance(values, str):
        return tuple(values.split())

    words: list[str] = []
    for value in values:
        text = normalize_optional_string(value)
        if text is not None:
            words.extend(text.split())
    return tuple(words)
