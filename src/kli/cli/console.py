"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any

from kli.exceptions import KliEnvironmentError


class State(Enum):
	"""Message states and the Rich style each one renders with."""

	SUCCESS = "bright_green"
	ERROR = "red"
	WARNING = "bright_yellow"
	INFO = "bright_cyan"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``KliEnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise KliEnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout (or stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(
		self,
		*objects: object,
		style: str | None = None,
		markup: bool = True,
	) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except KliEnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(
			*objects,
			style=style,
			markup=markup,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)


def print_state(message: str, state: State, *, target: Any = None) -> None:
	"""Print *message* in the style mapped to *state*."""
	(target or console).print(message, style=state.value, markup=False)
