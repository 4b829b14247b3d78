"""Custom exception hierarchy for layerconf.

All exceptions that cross layer boundaries must inherit from
:class:`LayerconfError`.  Raw third-party exceptions (e.g. from PyYAML)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
LayerconfError
├── ConfigurationError
│   ├── MalformedSourceError
│   └── AmbiguousFlagError
├── UnknownKeyError
└── MissingDependencyError
"""

from __future__ import annotations


class LayerconfError(Exception):
    """Base exception for all layerconf errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Resolution ------------------------------------------------------------

class ConfigurationError(LayerconfError):
    """A resolution pass failed.  No partial configuration is produced."""


class MalformedSourceError(ConfigurationError):
    """Raised when a present configuration source cannot be read or parsed.

    Missing sources are never an error; this is reserved for sources that
    exist but whose content is unusable.
    """

    def __init__(
        self,
        source: str,
        location: str | None,
        cause: BaseException | str,
        *,
        hint: str | None = None,
    ) -> None:
        where = f" {location}" if location else ""
        super().__init__(
            f"could not read configuration{where} ({source}): {cause}",
            hint=hint,
        )
        self.source: str = source
        """Name of the layer the source feeds (e.g. ``project-config``)."""
        self.location: str | None = location
        """File path or other identity of the source, when known."""
        self.cause: BaseException | str = cause


class AmbiguousFlagError(ConfigurationError):
    """Raised when a single layer supplies both ``--x`` and ``--no-x``."""

    def __init__(self, key: str, layer: str) -> None:
        super().__init__(
            f"conflicting values for '{key}' in the {layer} layer",
            hint=f"Pass only one of --{key} / --no-{key}.",
        )
        self.key: str = key
        self.layer: str = layer


# --- Lookup ----------------------------------------------------------------

class UnknownKeyError(LayerconfError):
    """Raised when a key is not defined by any configuration layer."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"unknown configuration key: {key}",
            hint="Run 'layerconf show' to list every resolved key.",
        )
        self.key: str = key


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(LayerconfError):
    """Raised when an optional runtime dependency is not available."""
