"""The "should this invocation use color" decision.

A derived boolean, not a layer value: it is recomputed from the resolved
config and the terminal state every time it is asked for.  The rules are
checked in a fixed order and the first one that applies wins.
"""

from __future__ import annotations

from layerconf.core.models import LayerSource, ResolvedConfig, TerminalState

NO_COLOR_KEY: str = "NO_COLOR"
"""Env-layer key fed by the ``NO_COLOR`` environment variable."""

DUMB_TERMINAL: str = "dumb"


def explain_color(config: ResolvedConfig, terminal: TerminalState) -> tuple[bool, str]:
    """Return ``(use_color, reason)``.  Never raises."""
    if config.values.get("no-color") is True:
        return False, f"no-color set by {config.provenance.get('no-color')}"
    if config.values.get("color") is True:
        return True, f"color forced by {config.provenance.get('color')}"
    if config.is_defined_in(NO_COLOR_KEY, LayerSource.ENV.value):
        return False, "NO_COLOR is set in the environment"
    if terminal.terminal_type == DUMB_TERMINAL:
        return False, "TERM is 'dumb'"
    if not terminal.is_output_a_terminal:
        return False, "output is not a terminal"
    return True, "output is a terminal"


def should_use_color(config: ResolvedConfig, terminal: TerminalState) -> bool:
    use_color, _reason = explain_color(config, terminal)
    return use_color
