"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two outputs exist:

* :data:`console` — boundary messages (errors, aborts) on stderr.
* :class:`ConsoleTerminal` — the resignation dialogue on stdout,
  implementing the core :class:`~resign_demo.core.protocols.Terminal`.
"""

from __future__ import annotations

import sys
from typing import Any

from resign_demo.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True, **options: Any) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout).

	Extra keyword *options* are passed to ``Console`` unchanged.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, **options)


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


class ConsoleTerminal:
	"""Line-oriented stdout/stdin terminal for the resignation dialogue.

	Domain text is printed verbatim: no markup, highlighting or emoji
	shortcodes, and no hard wrapping of long lines.  The Rich console is
	created on first use and reused afterwards.
	"""

	def __init__(self) -> None:
		self._rich_console: Any = None
		self._rich_loaded: bool = False

	def _console(self) -> Any:
		"""Return the cached stdout console, or ``None`` without Rich."""
		if not self._rich_loaded:
			try:
				self._rich_console = get_rich_console(
					stderr=False,
					markup=False,
					highlight=False,
					emoji=False,
					soft_wrap=True,
				)
			except EnvironmentError:
				self._rich_console = None
			self._rich_loaded = True
		return self._rich_console

	def show(self, text: str = "") -> None:
		rich_console = self._console()
		if rich_console is None:
			print(text)
			return
		rich_console.print(text, markup=False, highlight=False, emoji=False)

	def ask(self, prompt: str) -> str | None:
		"""Prompt and read a line; ``None`` on end of input."""
		rich_console = self._console()
		try:
			if rich_console is None:
				return input(prompt)
			return rich_console.input(prompt, markup=False, emoji=False)
		except EOFError:
			return None
