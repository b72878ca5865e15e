"""Core / service layer — pure business logic and text transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; manifests are read and written through
  injected protocols.
* No imports from ``cli`` or ``infra``.
"""

from deptool.core.models import (
    DependencyDeclaration,
    DependencySpec,
    ManifestFile,
    RewriteReport,
    SearchRoot,
    SearchScope,
    SpecKind,
    SubstitutionResult,
)
from deptool.core.protocols import ManifestInspector, ManifestStore
from deptool.core.rewrite_service import DependencyRewriteService
from deptool.core.spec_builder import branch_spec, build_spec, version_spec

__all__: list[str] = [
    "DependencyDeclaration",
    "DependencyRewriteService",
    "DependencySpec",
    "ManifestFile",
    "ManifestInspector",
    "ManifestStore",
    "RewriteReport",
    "SearchRoot",
    "SearchScope",
    "SpecKind",
    "SubstitutionResult",
    "branch_spec",
    "build_spec",
    "version_spec",
]
