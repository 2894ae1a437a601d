"""Concordance report rendering.

Responsibilities:
- Render one deterministic line per `WordStat`, in concordance order.
- Write reports to a file or to standard output.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from ..models.datatypes import Concordance, WordStat


def format_word_stat(stat: WordStat) -> str:
    """Render one record as `{ word:<w>, count:<c>, fstPosition:<p>, avgDistance:<d> }`."""

    return (
        f"{{ word:{stat.word}, count:{stat.count}, "
        f"fstPosition:{stat.first_position}, avgDistance:{stat.avg_distance} }}"
    )


def render_concordance(concordance: Concordance) -> str:
    """Render the full report; an empty concordance renders as an empty string."""

    return "".join(f"{format_word_stat(stat)}\n" for stat in concordance)


def write_concordance(concordance: Concordance, stream: TextIO) -> int:
    """Write report lines to an open stream and return the number of lines written."""

    stream.write(render_concordance(concordance))
    stream.flush()
    return len(concordance)


def write_report(concordance: Concordance, path: Path | None) -> int:
    """Write the report to a UTF-8 file, or to standard output when `path` is `None`."""

    if path is None:
        return write_concordance(concordance, sys.stdout)

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as stream:
        return write_concordance(concordance, stream)
