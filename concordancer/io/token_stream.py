"""Whitespace-delimited token sources.

Responsibilities:
- Split a text stream into tokens lazily, one line at a time.
- Open file-backed sources or fall back to standard input.

Whitespace follows the C locale (space, tab, newline, vertical tab, form
feed, carriage return); other Unicode spaces stay inside tokens.
"""

from __future__ import annotations

import io
import re
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

_TOKEN_PATTERN = re.compile(r"[^ \t\n\v\f\r]+")


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from an open, readable text stream."""

    for line in stream:
        for match in _TOKEN_PATTERN.finditer(line):
            yield match.group()


def read_tokens(path: Path | None) -> Iterator[str]:
    """Yield tokens from a UTF-8 file, or from standard input when `path` is `None`.

    Both sources are decoded as UTF-8 regardless of the locale. The file is
    closed once the iterator is exhausted or closed; standard input is left open.

    Raises:
        FileNotFoundError: If the file doesn't exist (raised on first iteration).
        UnicodeDecodeError: If the input can't be decoded as UTF-8.
    """

    if path is None:
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")
        try:
            yield from iter_tokens(stdin)
        finally:
            stdin.detach()
        return

    with Path(path).open("r", encoding="utf-8") as stream:
        yield from iter_tokens(stream)
