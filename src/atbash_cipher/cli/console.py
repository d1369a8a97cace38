"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version`` and plain
encode/decode keep working even when it is not installed.  The console
writes to stderr; cipher results go to stdout untouched.
"""

from __future__ import annotations

import sys
from typing import Any

from atbash_cipher.exceptions import EnvironmentError


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


def rich_available() -> bool:
	"""Return whether Rich can be imported."""
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return False
	return True


def escape(text: str) -> str:
	"""Escape *text* for interpolation into a Rich markup string.

	Without Rich, nothing interprets markup, so *text* is returned as is.
	"""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


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


console = _ConsoleProxy()
