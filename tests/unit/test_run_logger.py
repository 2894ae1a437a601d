"""Unit tests for deterministic loguru-backed run logging."""

from __future__ import annotations

import io

from concordancer.telemetry.logger import RunLogger


def test_run_logger_emits_phase_lines_with_sorted_context() -> None:
    """Stage events should render as stable `[phase]` lines."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("build")
    run_logger.log_stage_complete("build", unique_words=4, tokens_kept=6)
    run_logger.log_stage_failure("write", "PermissionError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=build event=start",
        "[phase] level=INFO stage=build event=complete tokens_kept=6 unique_words=4",
        "[phase] level=ERROR stage=write event=failure error_type=PermissionError",
    ]


def test_run_logger_sanitizes_context_values() -> None:
    """Context values should be reduced to shell-safe tokens."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_complete("sort", key="count desc", note="")

    assert sink.getvalue().strip() == (
        "[phase] level=INFO stage=sort event=complete key=count_desc note=none"
    )


def test_run_logger_respects_level_threshold() -> None:
    """Events below the configured level should be dropped."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink, level="ERROR")

    run_logger.log_stage_start("build")
    run_logger.log_stage_failure("build", "FileNotFoundError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=ERROR stage=build event=failure error_type=FileNotFoundError",
    ]
