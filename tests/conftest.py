"""Shared pytest fixtures for the full Concordancer test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_TEXT = "The cat sat. The cat ran!"

_CONCORDANCER_ENV_KEYS = (
    "CONCORDANCER_INPUT",
    "CONCORDANCER_OUTPUT",
    "CONCORDANCER_FIELD",
    "CONCORDANCER_SORT",
    "CONCORDANCER_IGNORE",
)


@pytest.fixture(autouse=True)
def _clear_concordancer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment settings from leaking into config resolution."""

    for key in _CONCORDANCER_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_text_path(tmp_path: Path) -> Path:
    """Write the two-sentence sample text used across tests and return its path."""

    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_TEXT + "\n", encoding="utf-8")
    return path
