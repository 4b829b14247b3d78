"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from layerconf.core.models import Layer, LayerSource


class LayerProvider(Protocol):
    """Contract for anything that can produce one configuration layer.

    Any object exposing :attr:`source` and :meth:`load` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    @property
    def source(self) -> LayerSource:
        """The precedence level this provider feeds."""
        ...  # pragma: no cover

    def load(self) -> Layer:
        """Read the underlying source and return it as a :class:`Layer`.

        A missing source (absent file, unset variable) must yield an
        empty layer, never an exception.

        Raises
        ------
        MalformedSourceError
            When the source exists but cannot be read or parsed.
        """
        ...  # pragma: no cover
