"""Construction of dependency replacement specifiers.

Pure functions only; the result is inserted verbatim after ``=`` on
each matching manifest line.
"""

from __future__ import annotations

from deptool.core.models import DependencySpec, SpecKind
from deptool.exceptions import UsageError
from deptool.utils.constants import LIB3H_REPO_URL


def version_spec(version: str) -> DependencySpec:
    """Return the pinned-equality specifier ``"=<version>"``."""
    value = _require_value(version, SpecKind.VERSION)
    return DependencySpec(
        kind=SpecKind.VERSION,
        value=value,
        text=f'"={value}"',
    )


def branch_spec(branch: str, *, repo_url: str = LIB3H_REPO_URL) -> DependencySpec:
    """Return the git-branch specifier for *branch* of *repo_url*."""
    value = _require_value(branch, SpecKind.BRANCH)
    return DependencySpec(
        kind=SpecKind.BRANCH,
        value=value,
        text=f'{{ git = "{repo_url}", branch = "{value}" }}',
    )


def build_spec(kind: SpecKind | str, value: str) -> DependencySpec:
    """Build a :class:`DependencySpec` for *kind*.

    Raises
    ------
    UsageError
        If *kind* is unknown or *value* is blank.
    """
    try:
        spec_kind = SpecKind(kind)
    except ValueError as exc:
        raise UsageError(f"unknown dependency spec kind '{kind}'") from exc

    if spec_kind is SpecKind.VERSION:
        return version_spec(value)
    return branch_spec(value)


def _require_value(value: str | None, kind: SpecKind) -> str:
    stripped = (value or "").strip()
    if not stripped:
        raise UsageError(f"missing {kind.value} value")
    return stripped
