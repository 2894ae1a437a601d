"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
the usage summary, sort-key listings and run summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ConcordanceStageError, UnsupportedSortKey
from .models.datatypes import SortKey
from .pipeline import ConcordanceRun

USAGE_SUMMARY = (
    "Usage: concordancer build [INPUT] "
    "--field <word|count|fstPosition|avgDistance> "
    "--sort <asc|desc> "
    "[--out OUTPUT] "
    '[--ignore "word1 word2 ..."] '
    "[--config CONFIG.yaml]"
)


def echo_usage(err: bool = True) -> None:
    """Print the one-line usage summary."""

    typer.echo(USAGE_SUMMARY, err=err)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics and usage for command failures and exit with code 1."""

    if isinstance(exc, ConcordanceStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, UnsupportedSortKey):
        typer.secho(f"{command_name} failed: {exc.detail}", fg=typer.colors.RED, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    echo_usage()
    raise typer.Exit(code=1) from exc


def echo_sort_keys(keys: tuple[SortKey, ...]) -> None:
    """Print supported `field sort` combinations, one per line."""

    for key in keys:
        typer.echo(key.label)


def echo_run_summary(run: ConcordanceRun) -> None:
    """Print a short run summary to stderr, keeping stdout for the report."""

    typer.echo(
        f"Words: {run.stats.unique_words} unique / {run.stats.tokens_kept} kept "
        f"/ {run.stats.tokens_read} read",
        err=True,
    )
    typer.echo(f"Sorted by: {run.sort_key.label}", err=True)
    if run.output_path is not None:
        typer.echo(f"Report: {run.output_path}", err=True)
