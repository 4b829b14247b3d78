"""Per-layer rewriting of ``--x`` / ``--no-x`` surface forms.

Negation is a layer-local concern: it runs on each layer independently,
before any cross-layer merge, so a ``--no-color`` on the command line
and a ``no-color: true`` in a config file compete purely on precedence.

For a registered flag ``x``:

* ``--x``    → ``x = True``,  ``no-x = False``
* ``--no-x`` → ``x = False``, ``no-x = True``

Presence of the surface key is what counts; its raw value is ignored.
A plain ``x: true`` or ``no-x: true`` forces the flag the same way, so its
complement is written too.  ``False`` plain values force nothing.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from layerconf.core.models import Layer, NegatableFlag
from layerconf.exceptions import AmbiguousFlagError


def _forced_states(values: dict[str, Any], flag: NegatableFlag) -> set[bool]:
    """Every on/off state the layer asks for, surface or plain."""
    states: set[bool] = set()
    if flag.positive_form in values:
        states.add(True)
    if flag.negative_form in values:
        states.add(False)
    if values.get(flag.key) is True:
        states.add(True)
    if values.get(flag.negated_key) is True:
        states.add(False)
    return states


def _rewrite(values: dict[str, Any], flag: NegatableFlag, layer_name: str) -> None:
    if flag.positive_form in values and flag.negative_form in values:
        raise AmbiguousFlagError(flag.key, layer_name)

    states = _forced_states(values, flag)
    if not states:
        return
    if len(states) > 1:
        raise AmbiguousFlagError(flag.key, layer_name)

    (enabled,) = states
    values.pop(flag.positive_form, None)
    values.pop(flag.negative_form, None)

    for key, value in ((flag.key, enabled), (flag.negated_key, not enabled)):
        # A plain value in the same layer that disagrees is just as ambiguous.
        if key in values and values[key] != value:
            raise AmbiguousFlagError(flag.key, layer_name)
        values[key] = value


def normalize_layer(layer: Layer, flags: Iterable[NegatableFlag]) -> Layer:
    """Return a copy of *layer* with negatable surface forms rewritten.

    Unregistered ``--…`` keys pass through untouched.

    Raises
    ------
    AmbiguousFlagError
        If the layer holds both forms of one flag, or its surface forms
        and plain values ask for opposite states.
    """
    values = dict(layer.values)
    for flag in flags:
        _rewrite(values, flag, layer.name)
    return Layer(source=layer.source, values=values, origin=layer.origin)
