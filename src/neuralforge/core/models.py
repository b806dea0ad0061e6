"""Domain models for the neuralforge launcher.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedOptions:
    """Flag values recovered from the raw process arguments."""

    verbose: bool = False
    """``--verbose`` / ``-v``."""

    input: str | None = None
    """``--input`` / ``-i`` path, or ``None`` when absent."""

    output: str | None = None
    """``--output`` / ``-o`` path, or ``None`` when absent."""

    extras: dict[str, Any] = field(default_factory=dict)
    """Unrecognised flags, keyed by name without leading dashes."""

    positionals: tuple[str, ...] = ()
    """Bare words that were not consumed as a flag value."""

    def as_mapping(self) -> dict[str, Any]:
        """Return every parsed flag as a single name → value mapping."""
        mapping: dict[str, Any] = dict(self.extras)
        mapping.update(verbose=self.verbose, input=self.input, output=self.output)
        return mapping


# ---------------------------------------------------------------------------
# Application configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Configuration:
    """The subset of :class:`ParsedOptions` handed to the application.

    ``input`` and ``output`` are parsed but deliberately absent here.
    """

    verbose: bool = False


# ---------------------------------------------------------------------------
# Run outcome
# ---------------------------------------------------------------------------

class RunState(enum.Enum):
    """Terminal state of a single run."""

    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of one ``execute`` call, translated to an exit code by the CLI."""

    state: RunState
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.state is RunState.DONE
