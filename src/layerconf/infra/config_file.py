"""YAML-backed configuration file layers.

This module is the **only** place in the codebase that imports ``yaml``.
All PyYAML and OS read errors are caught here and re-raised as
:class:`~layerconf.exceptions.MalformedSourceError` — nothing raw escapes
the infrastructure boundary.

Rules
-----
* A missing file is an empty layer, never an error.
* Parsing uses ``yaml.safe_load`` only.
* Layers are flat: nested mappings are kept as opaque values.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from layerconf.core.models import Layer, LayerSource
from layerconf.exceptions import MalformedSourceError

logger = logging.getLogger(__name__)


class YamlConfigFile:
    """Concrete :class:`~layerconf.core.protocols.LayerProvider` for one file.

    Usage::

        provider = YamlConfigFile(LayerSource.USER_CONFIG, Path("~/.config/x.yaml"))
        layer = provider.load()

    *path* may be ``None`` when discovery found nothing; the provider then
    yields an empty layer.
    """

    def __init__(self, source: LayerSource, path: Path | None) -> None:
        self._source: LayerSource = source
        self._path: Path | None = path

    @property
    def source(self) -> LayerSource:
        return self._source

    @property
    def path(self) -> Path | None:
        return self._path

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def load(self) -> Layer:
        """Read and parse the file.

        Raises
        ------
        MalformedSourceError
            If the file exists but cannot be read, is not valid YAML, or
            does not contain a mapping at the top level.
        """
        if self._path is None or not self._path.is_file():
            logger.debug("no %s file at %s", self._source.value, self._path)
            return Layer(source=self._source, values={}, origin=self._origin())

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise self._error(exc) from exc

        values = self.parse(text)
        return Layer(source=self._source, values=values, origin=self._origin())

    def parse(self, text: str) -> dict[str, Any]:
        """Parse YAML *text* into a flat key/value mapping.

        Raises
        ------
        MalformedSourceError
            On invalid syntax or a non-mapping document.
        """
        try:
            document: Any = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise self._error(exc) from exc

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise self._error(
                f"expected a mapping at the top level, got {type(document).__name__}",
            )
        return {str(key): value for key, value in document.items()}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _origin(self) -> str | None:
        return str(self._path) if self._path is not None else None

    def _error(self, cause: BaseException | str) -> MalformedSourceError:
        return MalformedSourceError(
            self._source.value,
            self._origin(),
            cause,
            hint="Fix the file or move it aside to fall back to other layers.",
        )
