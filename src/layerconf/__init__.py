"""layerconf — layered CLI configuration with per-key provenance.

Merges flags, environment, config files and defaults into one effective
configuration and records which layer supplied every value.
"""

from layerconf.version import __version__

__all__: list[str] = ["__version__"]
