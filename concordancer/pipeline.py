"""Concordance run orchestration.

Responsibilities:
- Run the `sort-key -> build -> sort -> write` stages in order.
- Emit stage start/complete/failure events through `RunLogger`.
- Map stage failures to `ConcordanceStageError` with actionable hints.

The sort key is resolved before any input is read, so an unsupported key
aborts the run without consuming the source or producing output.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from .builder import ConcordanceBuilder
from .config import ConcordanceConfig, RuntimeConfigSources
from .errors import ConcordanceStageError, UnsupportedSortKey
from .io.report_writer import write_report
from .io.token_stream import read_tokens
from .models.datatypes import BuildStats, Concordance, SortDirection, SortField, SortKey
from .sorting import sort_by_key
from .telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")

SORT_KEY_HINT = (
    "Use `--field` with one of: "
    + ", ".join(member.value for member in SortField)
    + "; and `--sort` with one of: "
    + ", ".join(member.value for member in SortDirection)
    + "."
)


@dataclass(frozen=True, slots=True)
class ConcordanceRun:
    """Outcome of one completed concordance run.

    Attributes:
        sort_key: Sort key applied to the concordance.
        concordance: Sorted concordance records.
        stats: Token bookkeeping from the build pass.
        lines_written: Number of report lines written.
        output_path: Report file, or `None` when written to standard output.
    """

    sort_key: SortKey
    concordance: Concordance
    stats: BuildStats
    lines_written: int
    output_path: Path | None


class ConcordancePipeline:
    """Build, sort and write a concordance for one configured input."""

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        """Initialize pipeline with an optional structured run logger."""

        self._run_logger = run_logger

    def run(
        self,
        config: ConcordanceConfig,
        sources: RuntimeConfigSources | None = None,
    ) -> ConcordanceRun:
        """Execute all stages for `config` and return the run outcome."""

        sort_key = self._run_stage("sort-key", lambda: self._resolve_sort_key(config, sources))
        builder = ConcordanceBuilder(ignore_words=config.ignore_words)
        concordance = self._run_stage(
            "build",
            lambda: self._build(builder, config.input_path),
            lambda _: {
                "tokens_read": builder.stats.tokens_read,
                "tokens_kept": builder.stats.tokens_kept,
                "unique_words": builder.stats.unique_words,
            },
        )
        self._run_stage(
            "sort",
            lambda: sort_by_key(concordance, sort_key),
            lambda _: {"key": sort_key.label},
        )
        lines_written = self._run_stage(
            "write",
            lambda: self._write(concordance, config.output_path),
            lambda result: {"lines": result},
        )
        return ConcordanceRun(
            sort_key=sort_key,
            concordance=concordance,
            stats=builder.stats,
            lines_written=lines_written,
            output_path=config.output_path,
        )

    def _resolve_sort_key(
        self,
        config: ConcordanceConfig,
        sources: RuntimeConfigSources | None,
    ) -> SortKey:
        """Resolve configured sort settings into a supported sort key."""

        try:
            settings = config.resolved_sort_settings(sources)
        except ValueError as exc:
            raise ConcordanceStageError(
                stage="config",
                detail=str(exc),
                hint=SORT_KEY_HINT,
            ) from exc

        try:
            return SortKey.parse(settings.field, settings.direction)
        except UnsupportedSortKey as exc:
            raise ConcordanceStageError(
                stage="sort-key",
                detail=exc.detail,
                hint=SORT_KEY_HINT,
            ) from exc

    def _build(self, builder: ConcordanceBuilder, input_path: Path | None) -> Concordance:
        """Consume the configured token source into a concordance."""

        source_label = f"`{input_path}`" if input_path is not None else "standard input"
        try:
            return builder.build(read_tokens(input_path))
        except FileNotFoundError as exc:
            raise ConcordanceStageError(
                stage="build",
                detail=f"Input file not found: {source_label}.",
                hint="Pass an existing text file or pipe text through standard input.",
            ) from exc
        except UnicodeDecodeError as exc:
            raise ConcordanceStageError(
                stage="build",
                detail=f"Could not decode {source_label} as UTF-8: {exc}",
                hint="Convert the input to UTF-8 and rerun.",
            ) from exc
        except OSError as exc:
            raise ConcordanceStageError(
                stage="build",
                detail=f"Failed to read {source_label}: {exc}",
                hint="Verify the input path and file permissions.",
            ) from exc

    def _write(self, concordance: Concordance, output_path: Path | None) -> int:
        """Write the report and map I/O failures to stage errors."""

        try:
            return write_report(concordance, output_path)
        except OSError as exc:
            raise ConcordanceStageError(
                stage="write",
                detail=f"Failed to write report to `{output_path}`: {exc}",
                hint="Verify the output directory exists and is writable.",
            ) from exc

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        summarize: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            context = summarize(result) if summarize is not None else {}
            self._run_logger.log_stage_complete(stage_name, **context)
        return result
