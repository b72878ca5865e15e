"""Read-only TOML inspection of Cargo manifests.

Implements :class:`~deptool.core.protocols.ManifestInspector`.  Parsing is
never used to rewrite a manifest; it only tells the rewrite service
which declarations line matching cannot reach and whether a rewrite
kept the document parsable.
"""

from __future__ import annotations

import re
import sys
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_DEP_SECTIONS = ("dependencies", "dev-dependencies", "build-dependencies")

# [header] lines only; [[array]] headers never declare a dependency.
_TABLE_HEADER = re.compile(r"^[ \t]*\[(?!\[)(?P<key>[^\[\]\r\n]+)\][ \t]*(?:#[^\r\n]*)?$", re.MULTILINE)


def _key_path(dotted: str) -> list[str] | None:
    """Split a dotted TOML key into its parts, honouring quoting."""
    try:
        node: Any = tomllib.loads(f"{dotted} = 0")
    except tomllib.TOMLDecodeError:
        return None
    parts: list[str] = []
    while isinstance(node, dict) and len(node) == 1:
        key, node = next(iter(node.items()))
        parts.append(key)
    return parts


def _is_dependency_table(parts: list[str]) -> bool:
    """True for ``[<section>.<key>]`` under the top level, workspace or a target."""
    if len(parts) == 2:
        return parts[0] in _DEP_SECTIONS
    if len(parts) == 3:
        return parts[0] == "workspace" and parts[1] == "dependencies"
    if len(parts) == 4:
        return parts[0] == "target" and parts[2] in _DEP_SECTIONS
    return False


class TomlManifestInspector:
    """Concrete :class:`ManifestInspector` backed by ``tomllib``."""

    @staticmethod
    def _load(text: str) -> dict[str, Any] | None:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError:
            return None

    def is_valid(self, text: str) -> bool:
        return self._load(text) is not None

    def dependency_tables(self, text: str, name: str) -> list[str]:
        if self._load(text) is None:
            return []

        tables: list[str] = []
        for match in _TABLE_HEADER.finditer(text):
            header = match.group("key").strip()
            parts = _key_path(header)
            if not parts or not _is_dependency_table(parts):
                continue
            if parts[-1].startswith(name) and header not in tables:
                tables.append(header)
        return tables
