"""Configuration model and loaders for Concordancer.

Responsibilities:
- Define run configuration as a typed dataclass.
- Provide deterministic precedence resolution for sort settings.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ConcordanceConfig`: normalized settings for one concordance run.
- `SortSettings`: resolved field/direction names for the sorter.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `ConcordanceConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, split_word_list


_SORT_FIELD_ENV_KEY = "CONCORDANCER_FIELD"
_SORT_DIRECTION_ENV_KEY = "CONCORDANCER_SORT"


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic runtime value precedence.

    Attributes:
        cli: Values explicitly provided by CLI arguments.
        env: Values loaded from environment variables.
    """

    cli: Mapping[str, str] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SortSettings:
    """Resolved textual sort settings for one run.

    Values are passed to the sorter as-is; unsupported names are rejected there.
    """

    field: str
    direction: str


@dataclass(slots=True)
class ConcordanceConfig:
    """Runtime configuration for one concordance run.

    Attributes:
        input_path: Source text file, or `None` for standard input.
        output_path: Report destination file, or `None` for standard output.
        sort_field: Sort field name (`word`, `count`, `fstPosition`, `avgDistance`).
        sort_direction: Sort direction name (`asc` or `desc`).
        ignore_words: Words excluded from the concordance.
    """

    input_path: Path | None = None
    output_path: Path | None = None
    sort_field: str | None = None
    sort_direction: str | None = None
    ignore_words: tuple[str, ...] = ()

    def resolved_sort_settings(
        self, sources: RuntimeConfigSources | None = None
    ) -> SortSettings:
        """Resolve sort field and direction with deterministic source precedence.

        Precedence for each key is `cli` > `env` > config field value.
        """

        resolved_sources = sources if sources is not None else RuntimeConfigSources()
        sort_field = self._resolve_runtime_value(
            key="field",
            env_key=_SORT_FIELD_ENV_KEY,
            default_value=self.sort_field,
            sources=resolved_sources,
        )
        sort_direction = self._resolve_runtime_value(
            key="sort",
            env_key=_SORT_DIRECTION_ENV_KEY,
            default_value=self.sort_direction,
            sources=resolved_sources,
        )
        return SortSettings(field=sort_field, direction=sort_direction)

    def _resolve_runtime_value(
        self,
        key: str,
        env_key: str,
        default_value: str | None,
        sources: RuntimeConfigSources,
    ) -> str:
        """Resolve a runtime value from sources in deterministic precedence order."""

        cli_value = self._normalized_lookup(sources.cli, key)
        if cli_value is not None:
            return cli_value

        env_value = self._normalized_lookup(sources.env, env_key)
        if env_value is not None:
            return env_value

        normalized_default = normalize_optional_string(default_value)
        if normalized_default is None:
            raise ValueError(f"No required param `{key}`.")
        return normalized_default

    @staticmethod
    def _normalized_lookup(mapping: Mapping[str, str], key: str) -> str | None:
        """Return a stripped mapping value for a key or `None` when missing/blank."""

        if key not in mapping:
            return None
        return normalize_optional_string(mapping.get(key))


class ConfigLoader:
    """Factory methods for creating `ConcordanceConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"input", "output", "field", "sort", "ignore"})

    @staticmethod
    def from_yaml(path: Path) -> ConcordanceConfig:
        """Create a config from a YAML file.

        Sort settings may be left out of the file and supplied by CLI or env.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ConcordanceConfig:
        """Create a config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        return ConcordanceConfig(
            input_path=ConfigLoader._optional_env_path(env_map, "CONCORDANCER_INPUT"),
            output_path=ConfigLoader._optional_env_path(env_map, "CONCORDANCER_OUTPUT"),
            sort_field=ConfigLoader._optional_env_string(env_map, _SORT_FIELD_ENV_KEY),
            sort_direction=ConfigLoader._optional_env_string(env_map, _SORT_DIRECTION_ENV_KEY),
            ignore_words=split_word_list(
                ConfigLoader._optional_env_string(env_map, "CONCORDANCER_IGNORE")
            ),
        )

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ConcordanceConfig:
        """Build a config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        return ConcordanceConfig(
            input_path=ConfigLoader._optional_path(payload, "input"),
            output_path=ConfigLoader._optional_path(payload, "output"),
            sort_field=ConfigLoader._optional_non_empty_string(payload, "field"),
            sort_direction=ConfigLoader._optional_non_empty_string(payload, "sort"),
            ignore_words=ConfigLoader._optional_word_list(payload, "ignore", source_label),
        )

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject unsupported YAML keys."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_path(payload: Mapping[str, Any], key: str) -> Path | None:
        """Read an optional path-like field from a payload."""

        value = ConfigLoader._optional_non_empty_string(payload, key)
        if value is None:
            return None
        return Path(value)

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_word_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...]:
        """Read an optional word list given as a YAML list or whitespace-separated string."""

        if key not in payload:
            return ()

        raw = payload[key]
        if raw is None:
            return ()
        if isinstance(raw, (str, list, tuple)):
            return split_word_list(raw)
        raise ValueError(
            f"{source_label} field `{key}` must be a list or a whitespace-separated string."
        )

    @staticmethod
    def _optional_env_path(env: Mapping[str, str], key: str) -> Path | None:
        """Read an optional path value from environment mapping."""

        value = ConfigLoader._optional_env_string(env, key)
        if value is None:
            return None
        return Path(value)

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))
