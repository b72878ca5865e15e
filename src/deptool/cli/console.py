"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from deptool.exceptions import DeptoolError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DeptoolError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DeptoolError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Lines are never wrapped so paths and dependency specs stay intact.
	Pass ``markup=False`` for text that may contain square brackets,
	such as usage strings and file paths.
	"""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except DeptoolError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, markup=markup, highlight=False, soft_wrap=True)


console = _ConsoleProxy()
