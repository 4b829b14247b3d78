"""Rendering for ``show``, ``get`` and ``color``.

Renders the resolved configuration as a Rich table (or aligned plain
text when Rich is not installed) or as JSON.  No resolution logic lives
here; it only displays what the engine produced.
"""

from __future__ import annotations

import json
from typing import Any

from layerconf.cli.console import escape, out
from layerconf.core.models import Explanation, ResolvedConfig


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def format_value(value: Any) -> str:
    """Render a config value the way it would be written in YAML."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, default=str)


def config_as_dict(config: ResolvedConfig) -> dict[str, dict[str, Any]]:
    """``{key: {"value": ..., "source": ...}}`` for every resolved key."""
    return {
        key: {"value": config.values[key], "source": config.provenance[key]}
        for key in sorted(config.values)
    }


def _rows(config: ResolvedConfig) -> list[tuple[str, str, str]]:
    return [
        (key, format_value(config.values[key]), config.provenance[key])
        for key in sorted(config.values)
    ]


def _print_plain_table(rows: list[tuple[str, str, str]]) -> None:
    """Render the table without Rich."""
    key_width = max([len("Key"), *(len(row[0]) for row in rows)])
    value_width = max([len("Value"), *(len(row[1]) for row in rows)])
    print(f"{'Key':<{key_width}}  {'Value':<{value_width}}  Source")
    for key, value, source in rows:
        print(f"{key:<{key_width}}  {value:<{value_width}}  {source}")


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def render_config(config: ResolvedConfig, *, as_json: bool = False) -> None:
    """Print every resolved key with its value and source layer."""
    if as_json:
        print(json.dumps(config_as_dict(config), indent=2, sort_keys=True, default=str))
        return

    rows = _rows(config)
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        _print_plain_table(rows)
        return

    table = Table(show_header=True, header_style="bold cyan", border_style="dim")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_column("Source", style="green")
    for key, value, source in rows:
        table.add_row(Text(key), Text(value), Text(source))
    out.print(table)


def render_explanation(explanation: Explanation) -> None:
    value = escape(format_value(explanation.value))
    out.print(f"{value}  [dim](from {escape(explanation.source)})[/dim]")


def render_color_decision(use_color: bool, reason: str) -> None:
    verdict = "[green]on[/green]" if use_color else "[yellow]off[/yellow]"
    out.print(f"color: {verdict}  [dim]({escape(reason)})[/dim]")
