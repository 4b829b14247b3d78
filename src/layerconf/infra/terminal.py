"""Infrastructure: terminal-state detection.

Collects the two external facts the color decision needs: whether the
output stream is attached to a terminal, and the ``TERM`` type.

Rules
-----
* Detection never raises — an unusable stream is "not a terminal".
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import TextIO

from layerconf.core.models import TerminalState


def _isatty(stream: TextIO) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        # Closed, detached, or replaced by an object without isatty().
        return False


def detect_terminal(
    stream: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> TerminalState:
    """Probe *stream* (default ``sys.stdout``) and ``TERM``.

    Returns a :class:`TerminalState` regardless of what is found — the
    caller decides what to do with it.
    """
    env = os.environ if environ is None else environ
    target = sys.stdout if stream is None else stream
    return TerminalState(
        is_output_a_terminal=_isatty(target),
        terminal_type=env.get("TERM") or None,
    )
