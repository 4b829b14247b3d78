"""Allow ``python -m layerconf`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m layerconf`` behaves identically to the ``layerconf``
console script.
"""

from __future__ import annotations

from layerconf.cli.app import cli

if __name__ == "__main__":
    cli()
