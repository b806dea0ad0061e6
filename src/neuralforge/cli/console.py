"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from neuralforge.exceptions import EnvironmentError

LOGGER_NAME: str = "neuralforge"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def error(self, message: str, *, hint: str | None = None) -> None:
		"""Render an error line (and optional hint) without markup injection."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"Error: {message}", file=sys.stderr)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr)
			return

		from rich.markup import escape

		rich_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
		if hint:
			rich_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


console = _ConsoleProxy()


def _build_handler() -> logging.Handler:
	"""Return a Rich log handler on stderr, or a plain stream handler."""
	try:
		rich_console = get_rich_console()
	except EnvironmentError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(
			logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", "%H:%M:%S"),
		)
		return handler

	from rich.logging import RichHandler

	return RichHandler(console=rich_console, show_path=False, markup=False)


def configure_logging(verbose: bool, level: str = "WARNING") -> logging.Logger:
	"""Attach a single stderr handler to the ``neuralforge`` logger.

	``verbose`` forces ``DEBUG``; otherwise *level* applies.  Calling
	this again replaces the previous handler.
	"""
	logger = logging.getLogger(LOGGER_NAME)
	logger.handlers.clear()
	logger.propagate = False
	resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
	logger.setLevel(resolved)

	handler = _build_handler()
	handler.setLevel(resolved)
	logger.addHandler(handler)
	logger.debug("Logging initialised at %s", logging.getLevelName(resolved))
	return logger
