"""Allow ``python -m neuralforge`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m neuralforge`` behaves identically to the
``neuralforge`` console script.
"""

from __future__ import annotations

from neuralforge.cli.app import cli

if __name__ == "__main__":
    cli()
