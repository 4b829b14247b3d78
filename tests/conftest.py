"""Shared pytest fixtures and configuration for the layerconf test suite.

Guidelines
----------
* No internet access in any test.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state: the environment, working directory
  and XDG config locations are isolated for every test.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

_ISOLATED_VARS: tuple[str, ...] = (
    "EDITOR",
    "VISUAL",
    "PAGER",
    "NO_COLOR",
    "TERM",
    "XDG_CONFIG_HOME",
    "XDG_CONFIG_DIRS",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every config location at *tmp_path* and clear relevant vars."""
    for name in list(os.environ):
        if name.startswith("LAYERCONF_") or name in _ISOLATED_VARS:
            monkeypatch.delenv(name, raising=False)

    workdir = tmp_path / "project"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-home"))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "xdg-dirs"))
    return tmp_path


@pytest.fixture(autouse=True)
def reset_console_color() -> None:
    """Undo any color decision a previous CLI run left on the proxies."""
    from layerconf.cli.console import console, out

    console.configure(color=None)
    out.configure(color=None)
