"""Structured run logging utilities.

Responsibilities:
- Emit one `[phase]` line per stage transition through `loguru`.
- Default to stderr so logs never interleave with a report written to stdout.
"""

from __future__ import annotations

import re
import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_UNSAFE_TOKEN_CHARS = re.compile(r"[^\w\-.:/]")


def _context_token(key: str, value: object) -> str:
    """Render one `key=value` pair with the value reduced to shell-safe characters."""

    text = str(value).strip()
    return f"{key}={_UNSAFE_TOKEN_CHARS.sub('_', text) or 'none'}"


class RunLogger:
    """Emit deterministic phase logs for CLI-observable concordance runs."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to one plain-text sink at the given threshold."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _log_phase(self, level: str, stage: str, event: str, context: dict[str, object]) -> None:
        tokens = [f"level={level}", f"stage={stage}", f"event={event}"]
        tokens.extend(_context_token(key, context[key]) for key in sorted(context))
        _loguru_logger.log(level, "[phase] " + " ".join(tokens))

    def log_stage_start(self, stage: str) -> None:
        """Log that a stage began."""

        self._log_phase("INFO", stage, "start", {})

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Log that a stage finished, with optional summary counters."""

        self._log_phase("INFO", stage, "complete", context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Log a stage failure by exception type only."""

        self._log_phase("ERROR", stage, "failure", {"error_type": error_type})
