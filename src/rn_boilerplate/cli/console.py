"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``, error
reporting) remain functional even when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from rn_boilerplate.exceptions import EnvironmentError

_MARKUP_RE = re.compile(r"\[/?[a-z][a-z0-9 _#.-]*\]")


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
	return console_class(stderr=True, highlight=False)


def strip_markup(text: str) -> str:
	"""Remove Rich ``[style]...[/style]`` tags for plain output."""
	return _MARKUP_RE.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(
				*(strip_markup(obj) if isinstance(obj, str) else obj for obj in objects),
				file=sys.stderr,
			)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


# ---------------------------------------------------------------------------
# Styled one-liners
# ---------------------------------------------------------------------------

def escape_markup(message: str) -> str:
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return message
	return escape(message)


def log_header(message: str) -> None:
	console.print(f"[blue]{escape_markup(message)}[/blue]")


def log_info(message: str) -> None:
	console.print(f"[cyan]{escape_markup(message)}[/cyan]")


def log_success(message: str) -> None:
	console.print(f"[green]{escape_markup(message)}[/green]")


def log_warning(message: str) -> None:
	console.print(f"[yellow]{escape_markup(message)}[/yellow]")


def log_error(message: str) -> None:
	console.print(f"[bold red]{escape_markup(message)}[/bold red]")


def log_gray(message: str) -> None:
	console.print(f"[dim]{escape_markup(message)}[/dim]")


def log_plain(message: str = "") -> None:
	console.print(escape_markup(message))
