"""Infrastructure: install-directory resolution and manifest discovery.

Rules
-----
* Every path is derived from the tool's own install directory, never
  from the caller's working directory.
* Each root is inspected at exactly one depth — no recursive walk.
* A missing root or zero matches is not an error.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from pathlib import Path

from deptool.core.models import ManifestFile, SearchRoot, SearchScope
from deptool.utils.constants import (
    MANIFEST_NAME,
    REPO_ROOT_DEPTH,
    REPO_ROOT_RELATIVE,
    ZOMES_ROOT_DEPTH,
    ZOMES_ROOT_RELATIVE,
)


# ---------------------------------------------------------------------------
# Install location
# ---------------------------------------------------------------------------

_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def resolve_install_dir(entry_point: str | Path | None = None) -> Path:
    """Return the directory the search roots hang off, symlinks resolved.

    With *entry_point* (a launcher script) this is the launcher's
    directory; a symlinked launcher resolves to its final target.
    Without one it is the deptool checkout itself, which lives at
    ``<repo>/test/deptool`` and is installed in editable mode.  That
    anchor does not depend on ``sys.argv[0]``, so the ``deptool`` console
    script and ``python -m deptool`` scan the same roots.
    """
    if entry_point is None:
        return _PROJECT_ROOT
    return Path(entry_point).resolve().parent


def default_scope(install_dir: Path) -> SearchScope:
    """Build the fixed :class:`SearchScope` for *install_dir*.

    * ``<install>/../..`` — crate manifests two levels down.
    * ``<install>/../../app_spec/zomes`` — zome manifests three levels down.
    """
    return SearchScope(
        roots=(
            SearchRoot(
                directory=(install_dir / REPO_ROOT_RELATIVE).resolve(),
                depth=REPO_ROOT_DEPTH,
            ),
            SearchRoot(
                directory=(install_dir / ZOMES_ROOT_RELATIVE).resolve(),
                depth=ZOMES_ROOT_DEPTH,
            ),
        )
    )


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

def locate_manifests(scope: SearchScope, *, name: str = MANIFEST_NAME) -> tuple[ManifestFile, ...]:
    """Return every regular file called *name* at each root's exact depth.

    Roots are visited in scope order and paths are sorted within a root,
    so the result is deterministic for a fixed filesystem state.
    """
    seen: set[Path] = set()
    found: list[ManifestFile] = []
    for root in scope.roots:
        for path in _glob_at_depth(root, name):
            if path in seen:
                continue
            seen.add(path)
            found.append(ManifestFile(path=path))
    return tuple(found)


def _glob_at_depth(root: SearchRoot, name: str) -> list[Path]:
    if root.depth < 1 or not root.directory.is_dir():
        return []
    pattern = "/".join(["*"] * (root.depth - 1) + [name])
    return sorted(path for path in root.directory.glob(pattern) if path.is_file())
