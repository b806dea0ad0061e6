"""Custom exception hierarchy for neuralforge.

Every error raised by the launcher itself inherits from
:class:`NeuralForgeError` so that the CLI error boundary can render a
clean message without leaking internal stack traces.

Errors raised by the application's ``execute`` operation are **not**
wrapped: the harness reports whatever the application failed with.

Hierarchy
---------
NeuralForgeError
├── ConfigurationError
├── ApplicationLoadError
└── EnvironmentError
"""

from __future__ import annotations


class NeuralForgeError(Exception):
    """Base exception for all neuralforge launcher errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Settings ----------------------------------------------------------------

class ConfigurationError(NeuralForgeError):
    """Raised when environment-provided settings fail validation."""


# --- Application resolution --------------------------------------------------

class ApplicationLoadError(NeuralForgeError):
    """Raised when the configured application factory cannot be imported."""


# --- Environment / tooling ---------------------------------------------------

class EnvironmentError(NeuralForgeError):
    """Raised when an optional runtime dependency is not available."""
