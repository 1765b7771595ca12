"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap
paths (``--help``, ``--version``) and plain listing keep working when
Rich is not installed.

Two channels are exposed:

* :meth:`_ConsoleProxy.print` — status and error messages on stderr,
  with Rich markup.
* :meth:`_ConsoleProxy.out` — command data (preset names, tree lines)
  on stdout, written byte-for-byte with no Rich rendering.
"""

from __future__ import annotations

import sys
from typing import Any

from cargo_preset.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render a status message on stderr."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def out(self, text: str) -> None:
		"""Write one line of command output to stdout, without markup."""
		try:
			rich_console = get_rich_console(stderr=False)
		except MissingDependencyError:
			print(text)
			return
		# Unrendered: Rich would expand tabs and wrap long lines.
		rich_console.file.write(f"{text}\n")


console = _ConsoleProxy()
