"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two proxies are exported: :data:`console` for messages on stderr and
:data:`out` for command output on stdout.  Both honour the color decision
once :meth:`_ConsoleProxy.configure` has been called.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from layerconf.exceptions import MissingDependencyError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z0-9 #._-]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True, color: bool | None = None) -> Any:
	"""Create a Rich console instance.

	``color=None`` leaves detection to Rich; ``True`` forces styled output
	even off a terminal; ``False`` disables it.
	"""
	console_class = _load_rich_console_class()
	if color is None:
		return console_class(stderr=stderr)
	if color:
		return console_class(stderr=stderr, force_terminal=True)
	return console_class(stderr=stderr, no_color=True, color_system=None)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is unavailable."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Drop Rich style tags for plain-text output."""
	return _MARKUP_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr: bool = stderr
		self.color: bool | None = None

	def configure(self, *, color: bool | None) -> None:
		"""Apply the invocation's color decision to later output."""
		self.color = color

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr, color=self.color)
		except MissingDependencyError:
			stream = sys.stderr if self._stderr else sys.stdout
			plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
			print(*plain, file=stream)
			return
		rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
