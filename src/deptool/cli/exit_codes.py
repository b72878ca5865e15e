"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed, possibly without any edits."""

GENERAL_ERROR: int = 1
"""A known DeptoolError was caught. User-facing message was displayed."""

USAGE_ERROR: int = 1
"""Bad or missing command, subcommand, option or value."""

HELP_SHOWN: int = 1
"""``-h``/``--help`` was given.  Non-zero for compatibility with existing callers."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

UNPINNED_FOUND: int = 1
"""``lib3h show`` listed at least one dependency line not pinned to an exact version."""
