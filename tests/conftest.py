"""Shared pytest fixtures and configuration for the neuralforge test suite.

Guidelines
----------
* No internet access in any test.
* The application is always a test double injected through ``app_factory``
  or ``NEURALFORGE_APP``.
* Tests must not depend on OS state; launcher environment variables are
  cleared for every test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from neuralforge.cli.console import LOGGER_NAME
from neuralforge.core.models import Configuration


@pytest.fixture(autouse=True)
def _clean_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory,
) -> Iterator[None]:
    monkeypatch.delenv("NEURALFORGE_APP", raising=False)
    monkeypatch.delenv("NEURALFORGE_LOG_LEVEL", raising=False)
    # Keep a developer's .env out of the settings under test.
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    yield
    # Handlers may hold a captured stream that pytest closes after the test.
    logging.getLogger(LOGGER_NAME).handlers.clear()


class RecordingApp:
    """Application double that records its configuration and calls."""

    instances: list[RecordingApp] = []

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration
        self.executed = 0
        RecordingApp.instances.append(self)

    async def execute(self) -> None:
        self.executed += 1


class FailingApp:
    """Application double whose ``execute`` raises ``RuntimeError("boom")``."""

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration

    async def execute(self) -> None:
        raise RuntimeError("boom")


@pytest.fixture
def recording_app() -> Iterator[type[RecordingApp]]:
    RecordingApp.instances = []
    yield RecordingApp
    RecordingApp.instances = []


@pytest.fixture
def failing_app() -> type[FailingApp]:
    return FailingApp
