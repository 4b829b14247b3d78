"""Logging configuration for the ``layerconf`` command.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are attached here, once per invocation, to the package logger.
"""

from __future__ import annotations

import logging
import sys

from layerconf.utils.constants import APP_NAME

_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for_verbosity(verbosity: int) -> int:
    """``0`` → WARNING, ``1`` (``-v``) → INFO, ``2+`` (``-vv``) → DEBUG."""
    return _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]


def _build_handler(color: bool | None) -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler

    from layerconf.cli.console import get_rich_console

    return RichHandler(
        console=get_rich_console(stderr=True, color=color),
        show_time=False,
        show_path=False,
    )


def configure_logging(verbosity: int = 0, *, color: bool | None = None) -> logging.Logger:
    """Attach a fresh handler to the package logger and set its level.

    *color* follows :func:`~layerconf.cli.console.get_rich_console`.
    """
    logger = logging.getLogger(APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(_build_handler(color))
    logger.setLevel(level_for_verbosity(verbosity))
    return logger
