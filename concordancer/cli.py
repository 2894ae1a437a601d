"""Command-line interface for Concordancer.

Responsibilities:
- Expose user-facing commands for building and sorting concordances.
- Convert CLI arguments into `ConcordanceConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_run_summary, echo_sort_keys, exit_with_command_error
from .config import ConcordanceConfig, ConfigLoader, RuntimeConfigSources
from .errors import ConcordanceStageError
from .parsing import normalize_optional_string, split_word_list
from .pipeline import ConcordancePipeline
from .sorting import supported_sort_keys
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="concordancer",
    no_args_is_help=True,
    help="Build word-occurrence concordances from text.",
)


def _load_yaml_config(config_path: Path | None) -> ConcordanceConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConcordanceStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ConcordanceStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise ConcordanceStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    input_path: Path | None,
    out: Path | None,
    ignore: list[str] | None,
) -> ConcordanceConfig:
    """Resolve effective command config from YAML or env defaults and CLI overrides."""

    loaded_config = _load_yaml_config(config_file)
    base_config = loaded_config if loaded_config is not None else ConfigLoader.from_env()

    return ConcordanceConfig(
        input_path=input_path if input_path is not None else base_config.input_path,
        output_path=out if out is not None else base_config.output_path,
        sort_field=base_config.sort_field,
        sort_direction=base_config.sort_direction,
        ignore_words=base_config.ignore_words + split_word_list(ignore),
    )


def _runtime_sources(field: str | None, sort: str | None) -> RuntimeConfigSources:
    """Collect explicit CLI sort values on top of the process environment."""

    cli_values: dict[str, str] = {}
    normalized_field = normalize_optional_string(field)
    if normalized_field is not None:
        cli_values["field"] = normalized_field
    normalized_sort = normalize_optional_string(sort)
    if normalized_sort is not None:
        cli_values["sort"] = normalized_sort
    return RuntimeConfigSources(cli=cli_values, env=os.environ)


@app.command("build")
def build_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Path to source text. Reads standard input when omitted.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Report file. Writes standard output when omitted."),
    ] = None,
    field: Annotated[
        str | None,
        typer.Option(
            "--field",
            help="Sort field: `word`, `count`, `fstPosition`, or `avgDistance`.",
        ),
    ] = None,
    sort: Annotated[
        str | None,
        typer.Option("--sort", help="Sort direction: `asc` or `desc`."),
    ] = None,
    ignore: Annotated[
        list[str] | None,
        typer.Option(
            "--ignore",
            help='Whitespace-separated words to exclude, e.g. `--ignore "the a an"`.',
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with command defaults.",
        ),
    ] = None,
) -> None:
    """Build a concordance, sort it and write the report."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            input_path=input_path,
            out=out,
            ignore=ignore,
        )
        pipeline = ConcordancePipeline(run_logger=RunLogger())
        run = pipeline.run(config, _runtime_sources(field, sort))
    except Exception as exc:
        exit_with_command_error("build", exc)

    echo_run_summary(run)


@app.command("sort-keys")
def sort_keys_command() -> None:
    """List supported `field sort` combinations."""

    echo_sort_keys(supported_sort_keys())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
