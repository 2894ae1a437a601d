"""Input token sources and report writers for concordance runs."""

from .report_writer import format_word_stat, render_concordance, write_concordance, write_report
from .token_stream import iter_tokens, read_tokens

__all__ = [
    "format_word_stat",
    "iter_tokens",
    "read_tokens",
    "render_concordance",
    "write_concordance",
    "write_report",
]
