"""Environment-variable backed ``env`` layer.

The process environment is snapshotted once per :meth:`load` so the
layer is a consistent view even if the environment changes later.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from layerconf.core.layers import build_env_layer
from layerconf.core.models import EnvAlias, Layer, LayerSource


def snapshot_environment() -> dict[str, str]:
    """Return a detached copy of ``os.environ``."""
    return dict(os.environ)


class EnvironmentLayer:
    """Concrete :class:`~layerconf.core.protocols.LayerProvider` for ``env``.

    Parameters
    ----------
    aliases:
        Alias chains for logical keys (e.g. ``editor`` ← EDITOR, VISUAL).
    prefix:
        Optional variable prefix mapped onto kebab-case keys.
    environ:
        Explicit snapshot to use instead of the live process environment.
    """

    def __init__(
        self,
        aliases: Sequence[EnvAlias] = (),
        *,
        prefix: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._aliases: tuple[EnvAlias, ...] = tuple(aliases)
        self._prefix: str | None = prefix
        self._environ: Mapping[str, str] | None = environ

    @property
    def source(self) -> LayerSource:
        return LayerSource.ENV

    def load(self) -> Layer:
        environ = self._environ if self._environ is not None else snapshot_environment()
        return build_env_layer(environ, self._aliases, prefix=self._prefix)
