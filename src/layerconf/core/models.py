"""Domain models for layerconf.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Mapping attributes are copied on
construction and exposed read-only, so nothing handed to the engine can
be mutated behind its back.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


def _freeze(values: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(values))


# ---------------------------------------------------------------------------
# Precedence levels
# ---------------------------------------------------------------------------

class LayerSource(Enum):
    """The closed set of configuration layers, highest precedence first.

    Declaration order *is* precedence order; :attr:`rank` is derived from
    it so callers can never hand the engine a misordered integer.
    """

    FLAG = "flag"
    ENV = "env"
    PROJECT_CONFIG = "project-config"
    USER_CONFIG = "user-config"
    SYSTEM_CONFIG = "system-config"
    DEFAULT = "default"

    @property
    def rank(self) -> int:
        """Zero-based precedence; lower wins."""
        return list(LayerSource).index(self)


# ---------------------------------------------------------------------------
# Layer
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Layer:
    """One ranked source of raw configuration values."""

    source: LayerSource

    values: Mapping[str, Any] = field(default_factory=dict)
    """Key → raw value.  Frozen on construction."""

    origin: str | None = None
    """Where the values came from (file path, ``"os.environ"``, …)."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _freeze(self.values))

    @property
    def name(self) -> str:
        return self.source.value

    @property
    def rank(self) -> int:
        return self.source.rank


# ---------------------------------------------------------------------------
# Negation and environment aliases
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NegatableFlag:
    """A boolean key accepted as ``--key`` or ``--no-key``."""

    key: str

    @property
    def positive_form(self) -> str:
        return f"--{self.key}"

    @property
    def negative_form(self) -> str:
        return f"--no-{self.key}"

    @property
    def negated_key(self) -> str:
        """Plain key holding the complement (``no-color`` for ``color``)."""
        return f"no-{self.key}"


@dataclass(frozen=True, slots=True)
class EnvAlias:
    """Environment variables treated as equivalent for one logical key.

    Names are checked in order; the first one present wins.
    """

    key: str
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        if not self.names:
            raise ValueError(f"EnvAlias for '{self.key}' needs at least one name")


# ---------------------------------------------------------------------------
# Resolution output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """The merged, effective configuration plus per-key provenance.

    Invariant: ``values`` and ``provenance`` have identical key sets, and
    ``provenance[key]`` names the highest-precedence layer defining *key*.
    ``defined_in[key]`` lists every layer that defined *key*, highest
    precedence first, including the ones it was shadowed in.

    Instances compare by value but are deliberately unhashable: values may
    themselves be mappings or lists.
    """

    values: Mapping[str, Any] = field(default_factory=dict)
    provenance: Mapping[str, str] = field(default_factory=dict)
    defined_in: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _freeze(self.values))
        object.__setattr__(self, "provenance", _freeze(self.provenance))
        object.__setattr__(
            self,
            "defined_in",
            _freeze({key: tuple(names) for key, names in self.defined_in.items()}),
        )

    def is_defined_in(self, key: str, source: str) -> bool:
        """Whether the layer named *source* defined *key*, winning or not."""
        if self.provenance.get(key) == source:
            return True
        return source in self.defined_in.get(key, ())

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


@dataclass(frozen=True, slots=True)
class Explanation:
    """Answer to "what is *key* and where did it come from?"."""

    key: str
    value: Any
    source: str


# ---------------------------------------------------------------------------
# Terminal state
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TerminalState:
    """External terminal facts consulted by the color decision."""

    is_output_a_terminal: bool
    terminal_type: str | None = None
