"""Infrastructure layer — filesystem integration.

This layer wraps all interaction with the operating system: locating the
install directory, discovering manifests, and reading, parsing and
writing them.  Every raw ``OSError`` must be caught here and re-raised
as a :class:`~deptool.exceptions.DeptoolError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from deptool.infra.manifest_locator import default_scope, locate_manifests, resolve_install_dir
from deptool.infra.manifest_store import FileSystemManifestStore
from deptool.infra.toml_inspector import TomlManifestInspector

__all__: list[str] = [
    "FileSystemManifestStore",
    "TomlManifestInspector",
    "default_scope",
    "locate_manifests",
    "resolve_install_dir",
]
