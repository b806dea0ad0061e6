"""Protocols (interfaces) consumed by the core layer.

The harness depends ONLY on these protocols — never on a concrete
application class — so any object with the right shape can be driven,
including test doubles.
"""

from __future__ import annotations

from typing import Protocol

from neuralforge.core.models import Configuration


class Application(Protocol):
    """Contract for the application object driven by the harness.

    Any object that implements :meth:`execute` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    async def execute(self) -> None:
        """Run the application to completion.

        Returns nothing meaningful on success.  Any exception raised is
        treated as a failed run; the harness does not inspect it.
        """
        ...  # pragma: no cover


class ApplicationFactory(Protocol):
    """Callable that builds an :class:`Application` from a configuration.

    An application class whose constructor accepts a
    :class:`~neuralforge.core.models.Configuration` satisfies this
    protocol directly.
    """

    def __call__(self, configuration: Configuration) -> Application:
        ...  # pragma: no cover
