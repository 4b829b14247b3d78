"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, the process
environment, and the terminal.  Every raw third-party exception must be
caught here and re-raised as a
:class:`~layerconf.exceptions.LayerconfError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed providers consumed by the core layer.
"""

from layerconf.infra.config_file import YamlConfigFile
from layerconf.infra.environment import EnvironmentLayer, snapshot_environment
from layerconf.infra.paths import find_project_config, system_config_path, user_config_path
from layerconf.infra.terminal import detect_terminal

__all__: list[str] = [
    "EnvironmentLayer",
    "YamlConfigFile",
    "detect_terminal",
    "find_project_config",
    "snapshot_environment",
    "system_config_path",
    "user_config_path",
]
