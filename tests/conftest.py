"""Shared fixtures."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: object) -> None:
    """Keep UNITCMD_* variables and any local .env file out of every test."""
    for key in list(os.environ):
        if key.startswith("UNITCMD_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)  # type: ignore[arg-type]
