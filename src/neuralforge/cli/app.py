"""CLI application entry point for neuralforge.

This module is the **sole error boundary** for the entire launcher.
It turns a :class:`~neuralforge.core.models.RunResult` into an exit
code, renders launcher errors
(:class:`~neuralforge.exceptions.NeuralForgeError`), and handles
``KeyboardInterrupt`` and any unexpected ``Exception``.

Architecture notes
------------------
* No business logic lives here — the run itself is delegated to
  :func:`neuralforge.core.harness.run`.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence

from neuralforge.cli import exit_codes
from neuralforge.cli.arguments import parse_arguments
from neuralforge.cli.console import configure_logging, console
from neuralforge.config.settings import load_settings
from neuralforge.core.harness import build_configuration, run
from neuralforge.core.models import RunResult
from neuralforge.core.protocols import ApplicationFactory
from neuralforge.exceptions import NeuralForgeError
from neuralforge.infra.app_loader import load_application_factory

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Failure reporting
# ---------------------------------------------------------------------------

def _report_failure(result: RunResult) -> None:
    """Write the failed run's error to stderr exactly once."""
    error = result.error
    hint = getattr(error, "hint", None)
    message = str(error) or type(error).__name__
    console.error(message, hint=hint if isinstance(hint, str) else None)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    app_factory: ApplicationFactory | None = None,
) -> int:
    """Run the neuralforge launcher once.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    app_factory:
        Application factory to drive.  When ``None``, the factory named
        by ``NEURALFORGE_APP`` is imported.

    Returns
    -------
    int
        OS process exit code.
    """
    options = parse_arguments(argv)
    settings = load_settings()
    configure_logging(options.verbose, settings.log_level)

    logger.debug("Parsed options: %s", options.as_mapping())
    if options.extras or options.positionals:
        logger.debug(
            "Ignoring unrecognised arguments: extras=%s positionals=%s",
            options.extras,
            options.positionals,
        )

    configuration = build_configuration(options)
    factory = app_factory if app_factory is not None else load_application_factory(settings.app)

    result = asyncio.run(run(factory, configuration))
    if not result.ok:
        _report_failure(result)
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
    except NeuralForgeError as exc:
        console.error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    sys.exit(code)
