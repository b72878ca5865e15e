"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from deptool.core.models import ManifestFile


class ManifestStore(Protocol):
    """Contract for reading and writing manifest text.

    Any object that implements :meth:`read` and :meth:`write` with the
    correct signatures satisfies this protocol structurally.
    """

    def read(self, manifest: ManifestFile) -> str:
        """Return the full text of *manifest*, line endings untouched.

        Raises
        ------
        ManifestReadError
            When the file cannot be read.
        """
        ...  # pragma: no cover

    def write(self, manifest: ManifestFile, text: str) -> None:
        """Replace the content of *manifest* with *text*, all-or-nothing.

        Raises
        ------
        ManifestWriteError
            When the file cannot be written.  The original content must
            then still be intact.
        """
        ...  # pragma: no cover


class ManifestInspector(Protocol):
    """Contract for read-only structural inspection of manifest text."""

    def is_valid(self, text: str) -> bool:
        """Return ``True`` when *text* parses as a manifest document."""
        ...  # pragma: no cover

    def dependency_tables(self, text: str, name: str) -> list[str]:
        """Return the ``[...dependencies.<key>]`` table headers for *name*.

        Only section-form tables are reported, as written in the header
        (e.g. ``dev-dependencies.lib3h``); inline ``key = { ... }`` tables
        sit on a single line and are not included.  Unparsable *text*
        yields an empty list.
        """
        ...  # pragma: no cover
