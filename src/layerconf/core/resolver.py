"""The merge: ranked layers in, one :class:`ResolvedConfig` out.

Every function here is **pure** — no I/O, no hidden state, and the same
layers always produce the same values *and* the same provenance.

Pipeline order (enforced by :func:`resolve`):

1. **Order** — sort layers by rank explicitly; reject duplicate sources.
2. **Normalize** — rewrite negatable flags in every layer.
3. **Merge** — each key takes its value from the highest-precedence layer
   that defines it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from layerconf.core.models import Explanation, Layer, NegatableFlag, ResolvedConfig
from layerconf.core.negation import normalize_layer
from layerconf.exceptions import UnknownKeyError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1. Order
# ---------------------------------------------------------------------------

def order_layers(layers: Iterable[Layer]) -> list[Layer]:
    """Sort *layers* by rank, highest precedence first.

    Raises
    ------
    ValueError
        If two layers share a source; their relative precedence would be
        undefined.
    """
    ordered = sorted(layers, key=lambda layer: layer.rank)
    seen: set[str] = set()
    for layer in ordered:
        if layer.name in seen:
            raise ValueError(f"duplicate '{layer.name}' layer in one resolution pass")
        seen.add(layer.name)
    return ordered


# ---------------------------------------------------------------------------
# 2 + 3. Normalize and merge
# ---------------------------------------------------------------------------

def merge_layers(layers: Sequence[Layer]) -> ResolvedConfig:
    """Left-biased merge of already ordered, normalized *layers*."""
    values: dict[str, Any] = {}
    provenance: dict[str, str] = {}
    defined_in: dict[str, list[str]] = {}
    for layer in layers:
        for key in sorted(layer.values):
            defined_in.setdefault(key, []).append(layer.name)
            if key in values:
                continue
            values[key] = layer.values[key]
            provenance[key] = layer.name
    return ResolvedConfig(values=values, provenance=provenance, defined_in=defined_in)


def resolve(
    layers: Iterable[Layer],
    negatable_flags: Iterable[NegatableFlag] = (),
) -> ResolvedConfig:
    """Merge *layers* into one effective configuration.

    Layer order in the input does not matter.  All layers are normalized
    before merging, so a failure anywhere aborts the whole pass.

    Raises
    ------
    AmbiguousFlagError
        If any layer supplies both forms of a negatable flag.
    ValueError
        If two layers share a source.
    """
    flags = tuple(negatable_flags)
    normalized = [normalize_layer(layer, flags) for layer in order_layers(layers)]
    config = merge_layers(normalized)
    for key, source in config.provenance.items():
        logger.debug("resolved %s from %s", key, source)
    return config


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

def explain(config: ResolvedConfig, key: str) -> Explanation:
    """Return *key*'s effective value and the layer that supplied it.

    Raises
    ------
    UnknownKeyError
        If no layer defined *key*.
    """
    if key not in config.values:
        raise UnknownKeyError(key)
    return Explanation(key=key, value=config.values[key], source=config.provenance[key])
