"""Permissive command-line parsing for the launcher.

Known flags are handled by :mod:`argparse`; anything it does not
recognise is kept rather than rejected, so an unfamiliar flag never
turns into a usage error.

Recognised flags
----------------
* ``-v`` / ``--verbose``  — boolean
* ``-i`` / ``--input``    — string path
* ``-o`` / ``--output``   — string path
* ``-h`` / ``--help`` and ``-V`` / ``--version``
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from neuralforge.core.models import ParsedOptions
from neuralforge.version import __version__


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="neuralforge",
        description="Run the NeuralForge application once.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging; forwarded to the application.",
    )
    parser.add_argument(
        "--no-verbose",
        action="store_false",
        dest="verbose",
        default=False,
        help="Turn --verbose back off.",
    )
    parser.add_argument(
        "-i",
        "--input",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Input path.",
    )
    parser.add_argument(
        "-o",
        "--output",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Output path.",
    )
    return parser


_VERBOSE_NAMES: frozenset[str] = frozenset({"v", "verbose"})
_FALSE_WORDS: frozenset[str] = frozenset({"", "0", "false", "no", "off"})
_SHORT_SWITCHES: frozenset[str] = frozenset({"v", "h", "V"})
_SHORT_VALUES: frozenset[str] = frozenset({"i", "o"})


def _split_short_group(body: str) -> list[str]:
    """Break ``-vx`` style groups apart when they hold an unknown letter.

    A value flag ends the group and takes the rest of it as its value,
    the way :mod:`argparse` reads ``-ifile``.
    """
    if all(char in _SHORT_SWITCHES for char in body[:-1]) and (
        body[-1] in _SHORT_SWITCHES or body[-1] in _SHORT_VALUES
    ):
        return [f"-{body}"]

    tokens: list[str] = []
    for index, char in enumerate(body):
        if char in _SHORT_VALUES:
            tokens.append(f"-{body[index:]}")
            break
        tokens.append(f"-{char}")
    return tokens


def _normalise_tokens(argv: Sequence[str]) -> list[str]:
    """Rewrite spellings :mod:`argparse` would reject into ones it accepts.

    * ``--verbose=VALUE`` / ``-v=VALUE`` become ``--verbose`` or
      ``--no-verbose``.
    * Short groups mixing known and unknown letters (``-vx``) are split
      into single flags.
    """
    tokens: list[str] = []
    for position, token in enumerate(argv):
        if token == "--":
            tokens.extend(argv[position:])
            break

        if token.startswith("-") and "=" in token:
            name, _, value = token.lstrip("-").partition("=")
            if name in _VERBOSE_NAMES:
                falsy = value.strip().lower() in _FALSE_WORDS
                tokens.append("--no-verbose" if falsy else "--verbose")
                continue

        body = token[1:]
        if token.startswith("-") and not token.startswith("--") and len(body) > 1 and body.isalpha():
            tokens.extend(_split_short_group(body))
            continue

        tokens.append(token)
    return tokens


def _collect_extras(tokens: Sequence[str]) -> tuple[dict[str, Any], tuple[str, ...]]:
    """Split leftover tokens into unknown flags and bare positionals.

    ``--name value`` and ``--name=value`` map to ``"value"``; a flag
    followed by another flag (or nothing) maps to ``True``.  Everything
    after a literal ``--`` is positional.
    """
    extras: dict[str, Any] = {}
    positionals: list[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token == "--":
            positionals.extend(tokens[index:])
            break
        if not token.startswith("-") or token == "-":
            positionals.append(token)
            continue

        name, sep, value = token.lstrip("-").partition("=")
        if sep:
            extras[name] = value
        elif index < len(tokens) and not tokens[index].startswith("-"):
            extras[name] = tokens[index]
            index += 1
        else:
            extras[name] = True

    return extras, tuple(positionals)


def parse_arguments(argv: Sequence[str] | None = None) -> ParsedOptions:
    """Parse *argv* (``sys.argv[1:]`` when ``None``) into :class:`ParsedOptions`.

    Never fails on unknown input.  Only ``--help`` and ``--version``
    leave through :class:`SystemExit`.
    """
    parser = _build_parser()
    args, leftover = parser.parse_known_args(
        _normalise_tokens(sys.argv[1:] if argv is None else list(argv)),
    )
    extras, positionals = _collect_extras(leftover)
    return ParsedOptions(
        verbose=args.verbose,
        input=args.input,
        output=args.output,
        extras=extras,
        positionals=positionals,
    )
