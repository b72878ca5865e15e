"""Custom exception hierarchy for deptool.

All exceptions that cross layer boundaries must inherit from
:class:`DeptoolError`.  Raw ``OSError`` instances must NEVER propagate
beyond the infrastructure layer — they must be caught and re-raised as
a typed subclass defined here.

Hierarchy
---------
DeptoolError
├── UsageError
├── ManifestIOError
│   ├── ManifestReadError
│   └── ManifestWriteError
└── ManifestRewriteError
"""

from __future__ import annotations

from pathlib import Path


class DeptoolError(Exception):
    """Base exception for all deptool errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(DeptoolError):
    """Raised for a bad or missing command, subcommand, option or value.

    Always raised before any manifest is touched.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        usage: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.usage: str | None = usage
        """Help text rendered after the error message, if any."""


# --- Manifest I/O ----------------------------------------------------------

class ManifestIOError(DeptoolError):
    """Raised when a located manifest cannot be read or written."""

    def __init__(self, path: Path, message: str, *, hint: str | None = None) -> None:
        super().__init__(f"{path}: {message}", hint=hint)
        self.path: Path = path


class ManifestReadError(ManifestIOError):
    """Raised when a manifest cannot be read."""


class ManifestWriteError(ManifestIOError):
    """Raised when a manifest cannot be written back."""


# --- Rewrite integrity -----------------------------------------------------

class ManifestRewriteError(DeptoolError):
    """Raised when a rewrite would leave a valid manifest unparsable."""

    def __init__(self, path: Path, message: str, *, hint: str | None = None) -> None:
        super().__init__(f"{path}: {message}", hint=hint)
        self.path: Path = path


def append_recovery_suggestion(hint: str | None) -> str:
    """Append version-control recovery guidance to an existing hint.

    Earlier manifests keep their edits when a later one fails, so every
    I/O failure tells the user how to get back to a clean tree.  The
    suggestion is appended only once.
    """
    marker = "Manifests rewritten before the failure keep their edits."
    if hint and marker in hint:
        return hint
    lines = [hint] if hint else []
    lines.extend(
        (
            marker,
            "    re-run deptool, or restore them with: git checkout -- '*Cargo.toml'",
        )
    )
    return "\n".join(lines)
