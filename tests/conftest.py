"""Shared fixtures: every test runs without WEATHER_* env vars, in an empty cwd."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Drop WEATHER_* variables and chdir so ./config.yml does not exist."""
    for name in list(os.environ):
        if name.upper().startswith("WEATHER_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
