"""CLI application entry point and command routing for layerconf.

This module is the **sole error boundary** for the entire application.
It catches :class:`~layerconf.exceptions.LayerconfError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No resolution logic lives here — all work is delegated to the core
  engine and the infrastructure providers.
* Argument parsing only collects raw flag values; conflicts such as
  ``--color --no-color`` are left for the engine to reject.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from layerconf.cli import exit_codes
from layerconf.cli.console import console, escape, out
from layerconf.cli.logging_setup import configure_logging
from layerconf.core.color import explain_color
from layerconf.core.layers import (
    StaticLayerProvider,
    build_default_layer,
    build_flag_layer,
    coerce_scalar,
)
from layerconf.core.models import LayerSource
from layerconf.core.resolution_service import ResolutionService
from layerconf.core.resolver import explain
from layerconf.exceptions import (
    AmbiguousFlagError,
    LayerconfError,
    MalformedSourceError,
)
from layerconf.infra.config_file import YamlConfigFile
from layerconf.infra.environment import EnvironmentLayer
from layerconf.infra.paths import find_project_config, system_config_path, user_config_path
from layerconf.infra.terminal import detect_terminal
from layerconf.utils.constants import (
    APP_NAME,
    DEFAULTS,
    ENV_ALIASES,
    ENV_PREFIX,
    NEGATABLE_FLAGS,
    PROJECT_CONFIG_FILENAME,
)
from layerconf.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _parse_assignment(text: str) -> tuple[str, Any]:
    """``KEY=VALUE`` → ``(key, coerced value)`` for ``--set``."""
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    return key.strip(), coerce_scalar(value)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``layerconf show [--json]``  — every key, value and source
    * ``layerconf get KEY``        — one key and where it came from
    * ``layerconf color``          — the color decision and its reason
    * ``layerconf --version``
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Show the effective configuration and where each value comes from.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help=f"Project config file (default: nearest {PROJECT_CONFIG_FILENAME}).",
    )
    for key in ("color", "input"):
        parser.add_argument(f"--{key}", dest=f"flag_{key}", action="store_const", const=True)
        parser.add_argument(f"--no-{key}", dest=f"flag_no_{key}", action="store_const", const=True)
    parser.add_argument("--environment", metavar="NAME", help="Deployment environment.")
    parser.add_argument("--editor", metavar="CMD", help="Editor command.")
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        type=_parse_assignment,
        default=[],
        metavar="KEY=VALUE",
        help="Set any key on the command line (repeatable).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    show = subparsers.add_parser("show", help="List every resolved key with its source.")
    show.add_argument("--json", action="store_true", help="Emit JSON instead of a table.")
    get = subparsers.add_parser("get", help="Show one key and the layer that set it.")
    get.add_argument("key")
    subparsers.add_parser("color", help="Explain whether output would be colored.")
    return parser


# ---------------------------------------------------------------------------
# Layer wiring
# ---------------------------------------------------------------------------

def _requested_color(args: argparse.Namespace) -> bool | None:
    """Color choice made on the command line, before any layer is read."""
    if args.flag_no_color:
        return False
    if args.flag_color:
        return True
    return None


def _flag_values(args: argparse.Namespace) -> dict[str, Any]:
    """Raw flag-layer values; ``None`` marks an option not given."""
    values: dict[str, Any] = {
        "--color": args.flag_color,
        "--no-color": args.flag_no_color,
        "--input": args.flag_input,
        "--no-input": args.flag_no_input,
        "environment": args.environment,
        "editor": args.editor,
    }
    values.update(dict(args.assignments))
    return values


def _project_config(args: argparse.Namespace) -> Path | None:
    if args.config is None:
        return find_project_config(Path.cwd())
    if not args.config.is_file():
        logger.warning("config file %s does not exist; ignoring it", args.config)
    return args.config


def _build_service(args: argparse.Namespace) -> ResolutionService:
    """Instantiate one provider per layer and wrap them in the service."""
    providers = [
        StaticLayerProvider(build_flag_layer(_flag_values(args))),
        EnvironmentLayer(ENV_ALIASES, prefix=ENV_PREFIX),
        YamlConfigFile(LayerSource.PROJECT_CONFIG, _project_config(args)),
        YamlConfigFile(LayerSource.USER_CONFIG, user_config_path()),
        YamlConfigFile(LayerSource.SYSTEM_CONFIG, system_config_path()),
        StaticLayerProvider(build_default_layer(DEFAULTS)),
    ]
    return ResolutionService(providers, NEGATABLE_FLAGS)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the layerconf CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    console.configure(color=None)
    out.configure(color=None)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose, color=_requested_color(args))

    config = _build_service(args).resolve()
    use_color, reason = explain_color(config, detect_terminal(sys.stdout))
    console.configure(color=use_color)
    out.configure(color=use_color)
    configure_logging(args.verbose, color=use_color)

    from layerconf.cli.show import render_color_decision, render_config, render_explanation

    if args.command == "show":
        render_config(config, as_json=args.json)
    elif args.command == "get":
        render_explanation(explain(config, args.key))
    else:
        render_color_decision(use_color, reason)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _exit_code_for(exc: LayerconfError) -> int:
    if isinstance(exc, AmbiguousFlagError):
        return exit_codes.USAGE_ERROR
    if isinstance(exc, MalformedSourceError):
        return exit_codes.CONFIG_ERROR
    return exit_codes.GENERAL_ERROR


def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except LayerconfError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(_exit_code_for(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
