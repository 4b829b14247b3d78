"""Infrastructure: standard configuration file locations.

Locates the project, user and system config files following the XDG
base-directory conventions.  Every function returns ``None`` (or a path
that may not exist) rather than raising; an absent file simply means an
empty layer.

Rules
-----
* Environment is read from an explicit mapping when one is passed, so
  callers and tests never depend on process state.
* No file is created.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from layerconf.utils.constants import (
    APP_NAME,
    CONFIG_FILENAME,
    DEFAULT_XDG_CONFIG_DIRS,
    PROJECT_CONFIG_FILENAME,
    SYSTEM_CONFIG_FALLBACK_DIR,
)


def find_project_config(start: Path) -> Path | None:
    """Return the nearest project config file at or above *start*."""
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / PROJECT_CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def user_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """``$XDG_CONFIG_HOME/layerconf/config.yaml``, else ``~/.config/…``."""
    env = os.environ if environ is None else environ
    base = env.get("XDG_CONFIG_HOME") or ""
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME / CONFIG_FILENAME


def system_config_candidates(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Every system-wide location checked, in priority order."""
    env = os.environ if environ is None else environ
    dirs = env.get("XDG_CONFIG_DIRS") or DEFAULT_XDG_CONFIG_DIRS
    roots = [Path(entry) for entry in dirs.split(os.pathsep) if entry]
    roots.append(Path(SYSTEM_CONFIG_FALLBACK_DIR))
    return [root / APP_NAME / CONFIG_FILENAME for root in roots]


def system_config_path(environ: Mapping[str, str] | None = None) -> Path | None:
    """The first existing system-wide config file, or ``None``."""
    for candidate in system_config_candidates(environ):
        if candidate.is_file():
            return candidate
    return None
