"""Core / engine layer — pure resolution logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or environment access.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from layerconf.core.color import explain_color, should_use_color
from layerconf.core.layers import (
    StaticLayerProvider,
    build_default_layer,
    build_env_layer,
    build_flag_layer,
    resolve_env_alias,
)
from layerconf.core.models import (
    EnvAlias,
    Explanation,
    Layer,
    LayerSource,
    NegatableFlag,
    ResolvedConfig,
    TerminalState,
)
from layerconf.core.negation import normalize_layer
from layerconf.core.protocols import LayerProvider
from layerconf.core.resolution_service import ResolutionService
from layerconf.core.resolver import explain, resolve

__all__: list[str] = [
    "EnvAlias",
    "Explanation",
    "Layer",
    "LayerProvider",
    "LayerSource",
    "NegatableFlag",
    "ResolutionService",
    "ResolvedConfig",
    "StaticLayerProvider",
    "TerminalState",
    "build_default_layer",
    "build_env_layer",
    "build_flag_layer",
    "explain",
    "explain_color",
    "normalize_layer",
    "resolve",
    "resolve_env_alias",
    "should_use_color",
]
