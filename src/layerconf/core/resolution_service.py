"""Core resolution service — loads every layer, then resolves them.

This is the central service class consumed by the CLI layer.  It
depends on :class:`~layerconf.core.protocols.LayerProvider` objects
injected at construction time (dependency inversion), keeping the core
free of any filesystem or environment access.

Guarantees
----------
* Fail closed — the first provider error aborts the pass; no partial
  configuration is ever returned.
* Only :class:`~layerconf.exceptions.LayerconfError` subclasses escape.
* Holds no state between calls; every :meth:`resolve` loads afresh.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from layerconf.core.models import Explanation, Layer, NegatableFlag, ResolvedConfig
from layerconf.core.protocols import LayerProvider
from layerconf.core.resolver import explain, resolve
from layerconf.exceptions import LayerconfError, MalformedSourceError

logger = logging.getLogger(__name__)


class ResolutionService:
    """Stateless orchestration of one or more resolution passes.

    Parameters
    ----------
    providers:
        One provider per layer, in any order.
    negatable_flags:
        Flags whose ``--x`` / ``--no-x`` forms are normalized per layer.
    """

    def __init__(
        self,
        providers: Sequence[LayerProvider],
        negatable_flags: Iterable[NegatableFlag] = (),
    ) -> None:
        self._providers: tuple[LayerProvider, ...] = tuple(providers)
        self._negatable_flags: tuple[NegatableFlag, ...] = tuple(negatable_flags)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load_layers(self) -> list[Layer]:
        """Load every provider's layer.

        Raises
        ------
        MalformedSourceError
            If any present source cannot be read or parsed.
        """
        return [self._load(provider) for provider in self._providers]

    def resolve(self) -> ResolvedConfig:
        """Load all layers and merge them.

        Raises
        ------
        MalformedSourceError
            If any present source cannot be read or parsed.
        AmbiguousFlagError
            If a layer supplies both forms of a negatable flag.
        """
        return resolve(self.load_layers(), self._negatable_flags)

    def explain(self, key: str) -> Explanation:
        """Resolve afresh and report where *key* comes from."""
        return explain(self.resolve(), key)

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _load(provider: LayerProvider) -> Layer:
        """Call the provider and ensure only our exceptions escape."""
        source = provider.source
        try:
            layer = provider.load()
        except LayerconfError:
            # Already one of ours; propagate unchanged.
            raise
        except Exception as exc:
            raise MalformedSourceError(source.value, None, exc) from exc

        logger.debug(
            "loaded %s layer from %s (%d keys)",
            layer.name,
            layer.origin or "<unknown>",
            len(layer.values),
        )
        return layer
