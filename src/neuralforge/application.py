"""Default application driven by the ``neuralforge`` launcher.

Only the launcher-facing surface lives here: a constructor accepting a
:class:`~neuralforge.core.models.Configuration` and an asynchronous
:meth:`NeuralForge.execute`.  Point ``NEURALFORGE_APP`` at another
class to run something else.
"""

from __future__ import annotations

import asyncio
import logging

from neuralforge.core.models import Configuration

logger = logging.getLogger(__name__)


class NeuralForge:
    """Application entry object.

    Satisfies :class:`~neuralforge.core.protocols.Application`
    structurally.
    """

    def __init__(self, configuration: Configuration) -> None:
        self.configuration: Configuration = configuration

    async def execute(self) -> None:
        logger.info("NeuralForge started (verbose=%s)", self.configuration.verbose)
        await asyncio.sleep(0)
        logger.info("NeuralForge finished")
