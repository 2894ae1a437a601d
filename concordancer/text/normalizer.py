"""Word normalization for concordance keys.

Responsibilities:
- Strip ASCII punctuation and fold ASCII letters to lowercase.
- Keep normalization locale-independent (C-locale `ispunct`/`tolower`
  semantics) so concordance keys are reproducible across platforms.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable

_NORMALIZE_TABLE = str.maketrans(
    string.ascii_uppercase, string.ascii_lowercase, string.punctuation
)


def normalize_word(token: str) -> str:
    """Return the concordance key for one token, or `""` when nothing is left.

    Non-ASCII characters pass through unchanged.
    """

    return token.translate(_NORMALIZE_TABLE)


def normalize_words(
    words: Iterable[str],
    normalizer: Callable[[str], str] = normalize_word,
) -> frozenset[str]:
    """Normalize a word list into a set, dropping words that normalize to empty."""

    normalized = (normalizer(word) for word in words)
    return frozenset(word for word in normalized if word)
