"""Core / service layer — the launcher contract and its data model.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from neuralforge.core.harness import build_configuration, run
from neuralforge.core.models import Configuration, ParsedOptions, RunResult, RunState
from neuralforge.core.protocols import Application, ApplicationFactory

__all__: list[str] = [
    "Application",
    "ApplicationFactory",
    "Configuration",
    "ParsedOptions",
    "RunResult",
    "RunState",
    "build_configuration",
    "run",
]
