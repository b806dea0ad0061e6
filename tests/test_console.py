"""Tests for console rendering and logging setup (cli/console.py).

Includes regression tests proving the CLI keeps working when the
optional Rich dependency is missing.
"""

from __future__ import annotations

import importlib.util
import logging
import sys

import pytest

from neuralforge.cli import exit_codes
from neuralforge.cli.app import main
from neuralforge.cli.console import LOGGER_NAME, configure_logging, console


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestConfigureLogging:
    def test_verbose_forces_debug(self) -> None:
        logger = configure_logging(True, "ERROR")
        assert logger.level == logging.DEBUG

    def test_level_applies_without_verbose(self) -> None:
        logger = configure_logging(False, "INFO")
        assert logger.level == logging.INFO

    def test_unknown_level_falls_back_to_warning(self) -> None:
        assert configure_logging(False, "chatty").level == logging.WARNING

    def test_reconfiguring_replaces_handler(self) -> None:
        configure_logging(False)
        logger = configure_logging(True)
        assert len(logger.handlers) == 1
        assert logger.name == LOGGER_NAME
        assert logger.propagate is False

    @pytest.mark.skipif(
        importlib.util.find_spec("rich") is None,
        reason="rich not installed",
    )
    def test_rich_handler_is_used(self) -> None:
        from rich.logging import RichHandler

        logger = configure_logging(False)
        assert isinstance(logger.handlers[0], RichHandler)

    def test_plain_handler_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        logger = configure_logging(False)
        assert type(logger.handlers[0]) is logging.StreamHandler

    def test_verbose_debug_reaches_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = configure_logging(True)
        logging.getLogger(f"{LOGGER_NAME}.core.harness").debug("constructing")
        assert "constructing" in capsys.readouterr().err
        assert logger.level == logging.DEBUG


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------

class TestConsoleError:
    def test_error_and_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.error("boom", hint="try again")
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "boom" in err
        assert "try again" in err

    def test_plain_fallback_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        console.error("boom", hint="try again")
        assert capsys.readouterr().err == "Error: boom\nHint: try again\n"


# ---------------------------------------------------------------------------
# CLI without Rich
# ---------------------------------------------------------------------------

def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_failed_run_reports_without_rich(
    failing_app, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    code = main([], app_factory=failing_app)
    assert code == exit_codes.GENERAL_ERROR
    assert capsys.readouterr().err == "Error: boom\n"
