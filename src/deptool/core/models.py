"""Domain models for deptool.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and must remain pure
across the entire lifecycle of a single invocation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Replacement specifier
# ---------------------------------------------------------------------------

class SpecKind(str, enum.Enum):
    """How a dependency should be resolved."""

    VERSION = "version"
    BRANCH = "branch"


@dataclass(frozen=True, slots=True)
class DependencySpec:
    """Right-hand side written for a dependency key."""

    kind: SpecKind
    """Which variant produced :attr:`text`."""

    value: str
    """The raw version or branch name given on the command line."""

    text: str
    """Literal TOML value inserted after ``=``."""

    def __str__(self) -> str:
        return self.text


# ---------------------------------------------------------------------------
# Manifests and where to find them
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class ManifestFile:
    """A ``Cargo.toml`` located on disk.  Identity is the path."""

    path: Path


@dataclass(frozen=True, slots=True)
class SearchRoot:
    """A directory scanned for manifests at exactly one depth."""

    directory: Path
    """Directory the depth is counted from."""

    depth: int
    """Nesting level of the manifest itself (``1`` = directly inside)."""


@dataclass(frozen=True, slots=True)
class SearchScope:
    """Ordered set of :class:`SearchRoot` entries scanned for manifests."""

    roots: tuple[SearchRoot, ...]

    def __len__(self) -> int:
        return len(self.roots)

    def __bool__(self) -> bool:
        return len(self.roots) > 0


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SubstitutionResult:
    """Outcome of substituting one document's text (pure, no I/O)."""

    text: str
    """Document text after substitution."""

    keys: tuple[str, ...]
    """Dependency keys whose line was rewritten, in document order."""

    @property
    def count(self) -> int:
        return len(self.keys)


@dataclass(frozen=True, slots=True)
class RewriteReport:
    """Per-manifest outcome of a rewrite."""

    manifest: ManifestFile
    keys: tuple[str, ...]
    """Dependency keys whose line was rewritten."""

    changed: bool
    """Whether the file content differs and was written back."""

    skipped_tables: tuple[str, ...] = ()
    """Headers of matching ``[...dependencies.<key>]`` tables, which line matching skips."""


@dataclass(frozen=True, slots=True)
class DependencyDeclaration:
    """Current right-hand side of a matching key in one manifest."""

    manifest: ManifestFile
    key: str
    value: str
    """Raw text after ``=`` as it appears in the file."""

    pinned: bool
    """``True`` when :attr:`value` is an exact ``"=X.Y.Z"`` pin."""
