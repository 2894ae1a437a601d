"""Token normalization helpers used before concordance accumulation."""

from .normalizer import normalize_word, normalize_words

__all__ = ["normalize_word", "normalize_words"]
