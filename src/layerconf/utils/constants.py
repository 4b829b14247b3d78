"""Application-wide constants for the ``layerconf`` command.

These describe *this* tool's configuration surface; the engine in
``core`` knows nothing about them and works with any keys.
"""

from __future__ import annotations

from typing import Any

from layerconf.core.models import EnvAlias, NegatableFlag

APP_NAME: str = "layerconf"

ENV_PREFIX: str = "LAYERCONF_"
"""Variables named ``LAYERCONF_<NAME>`` feed the key ``<name>``."""

PROJECT_CONFIG_FILENAME: str = ".layerconf.yaml"
CONFIG_FILENAME: str = "config.yaml"

DEFAULT_XDG_CONFIG_DIRS: str = "/etc/xdg"
SYSTEM_CONFIG_FALLBACK_DIR: str = "/etc"

NEGATABLE_FLAGS: tuple[NegatableFlag, ...] = (
    NegatableFlag("color"),
    NegatableFlag("input"),
)

ENV_ALIASES: tuple[EnvAlias, ...] = (
    EnvAlias("editor", ("LAYERCONF_EDITOR", "EDITOR", "VISUAL")),
    EnvAlias("pager", ("LAYERCONF_PAGER", "PAGER")),
    EnvAlias("environment", ("LAYERCONF_ENVIRONMENT", "LAYERCONF_ENV")),
    EnvAlias("NO_COLOR", ("NO_COLOR",)),
)

DEFAULTS: dict[str, Any] = {
    "environment": "development",
    "editor": "vi",
    "pager": "less",
    "color": False,
    "no-color": False,
    "input": True,
    "no-input": False,
}
