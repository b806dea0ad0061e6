"""Core execution harness — drives exactly one application run.

The harness builds the application from a
:class:`~neuralforge.core.models.Configuration`, awaits its ``execute``
operation once, and reports the outcome as a
:class:`~neuralforge.core.models.RunResult`.

Guarantees
----------
* No ``print()`` and no process exit — the CLI layer translates the
  result into an exit code.
* No retries and no recovery: the first failure ends the run.
* The error message is never logged here, so the CLI report is the only
  place it reaches the diagnostic stream.
"""

from __future__ import annotations

import asyncio
import logging

from neuralforge.core.models import Configuration, ParsedOptions, RunResult, RunState
from neuralforge.core.protocols import ApplicationFactory

logger = logging.getLogger(__name__)


def build_configuration(options: ParsedOptions) -> Configuration:
    """Derive the application configuration from parsed options.

    Only ``verbose`` is forwarded.
    """
    return Configuration(verbose=options.verbose)


async def run(factory: ApplicationFactory, configuration: Configuration) -> RunResult:
    """Construct the application and await its ``execute`` operation once.

    Parameters
    ----------
    factory:
        Any callable satisfying :class:`ApplicationFactory`.
    configuration:
        Passed unchanged to *factory*.

    Returns
    -------
    RunResult
        ``DONE`` when ``execute`` completed, ``FAILED`` carrying the
        original exception otherwise.
    """
    logger.debug("Constructing application (verbose=%s)", configuration.verbose)
    try:
        application = factory(configuration)
        logger.debug("Executing %s", type(application).__name__)
        await application.execute()
    except (Exception, asyncio.CancelledError) as exc:
        logger.debug("Run failed with %s", type(exc).__name__)
        return RunResult(RunState.FAILED, exc)

    logger.debug("Run completed")
    return RunResult(RunState.DONE)
