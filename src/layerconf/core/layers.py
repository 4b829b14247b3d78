"""Pure layer builders.

These turn already-collected raw data (parsed options, an environment
snapshot, a defaults table) into :class:`Layer` objects.  Reading the
real environment or the filesystem happens in ``infra``; everything here
works on plain mappings and never fails for a missing source.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from layerconf.core.models import EnvAlias, Layer, LayerSource

_INT_PATTERN = re.compile(r"[-+]?\d+")


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

def build_flag_layer(raw: Mapping[str, Any]) -> Layer:
    """Build the ``flag`` layer, dropping options the user did not pass.

    ``None`` means "not given on the command line" and must fall through
    to lower layers rather than shadow them.
    """
    values = {key: value for key, value in raw.items() if value is not None}
    return Layer(source=LayerSource.FLAG, values=values, origin="command line")


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

def resolve_env_alias(environ: Mapping[str, str], alias: EnvAlias) -> str | None:
    """Return the value of the first name in *alias* present in *environ*."""
    for name in alias.names:
        if name in environ:
            return environ[name]
    return None


def coerce_scalar(raw: str) -> Any:
    """Best-effort typing of a string from the environment or ``--set``.

    ``true``/``false`` (any case) become booleans, integer literals become
    ints, anything else is returned stripped.
    """
    stripped = raw.strip()
    lowered = stripped.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if _INT_PATTERN.fullmatch(stripped):
        return int(stripped)
    return stripped


def env_name_to_key(name: str, prefix: str) -> str:
    """``LAYERCONF_LOG_LEVEL`` → ``log-level``."""
    return name[len(prefix):].lower().replace("_", "-")


def build_env_layer(
    environ: Mapping[str, str],
    aliases: Sequence[EnvAlias] = (),
    *,
    prefix: str | None = None,
) -> Layer:
    """Build the ``env`` layer from an environment snapshot.

    Aliased keys take the first present alias name and are absent when
    none is set.  With *prefix*, every other ``<PREFIX>NAME`` variable is
    mapped to a kebab-case key with a coerced value.  Variables listed in
    an alias, and keys owned by an alias, are left to the alias.
    """
    values: dict[str, Any] = {}
    aliased = {alias.key for alias in aliases}
    claimed = {name for alias in aliases for name in alias.names}

    for alias in aliases:
        value = resolve_env_alias(environ, alias)
        if value is not None:
            values[alias.key] = value

    if prefix:
        for name in sorted(environ):
            if not name.startswith(prefix) or name == prefix or name in claimed:
                continue
            key = env_name_to_key(name, prefix)
            if key in aliased:
                continue
            values[key] = coerce_scalar(environ[name])

    return Layer(source=LayerSource.ENV, values=values, origin="environment")


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

def build_default_layer(defaults: Mapping[str, Any]) -> Layer:
    return Layer(source=LayerSource.DEFAULT, values=defaults, origin="built-in defaults")


class StaticLayerProvider:
    """A :class:`~layerconf.core.protocols.LayerProvider` over a fixed layer.

    Used for layers whose data is already in memory by the time the
    resolution pass starts (parsed flags, built-in defaults).
    """

    def __init__(self, layer: Layer) -> None:
        self._layer: Layer = layer

    @property
    def source(self) -> LayerSource:
        return self._layer.source

    def load(self) -> Layer:
        return self._layer
