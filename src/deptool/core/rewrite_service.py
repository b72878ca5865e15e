"""Core rewrite service — drives substitution across located manifests.

The service reads and writes through a
:class:`~deptool.core.protocols.ManifestStore` and checks structure
through a :class:`~deptool.core.protocols.ManifestInspector`, both
injected at construction time.  It is responsible for:

* Applying the line substitution to each manifest in order.
* Skipping the write when nothing changed.
* Refusing to write a manifest the substitution would break.
* Ensuring only :class:`~deptool.exceptions.DeptoolError` subclasses
  escape.

Manifests are processed sequentially.  The first failure aborts the
remaining manifests; earlier ones keep their edits.
"""

from __future__ import annotations

from collections.abc import Iterable

from deptool.core.models import (
    DependencyDeclaration,
    DependencySpec,
    ManifestFile,
    RewriteReport,
)
from deptool.core.protocols import ManifestInspector, ManifestStore
from deptool.core.substitution import find_declarations, is_pinned, substitute_dependency
from deptool.exceptions import (
    DeptoolError,
    ManifestReadError,
    ManifestRewriteError,
    ManifestWriteError,
    append_recovery_suggestion,
)


class DependencyRewriteService:
    """Stateless service that rewrites one dependency across manifests.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`ManifestStore` protocol.
    inspector:
        Any object satisfying the :class:`ManifestInspector` protocol.
    """

    def __init__(self, store: ManifestStore, inspector: ManifestInspector) -> None:
        self._store: ManifestStore = store
        self._inspector: ManifestInspector = inspector

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def rewrite(
        self,
        manifests: Iterable[ManifestFile],
        name: str,
        spec: DependencySpec,
    ) -> list[RewriteReport]:
        """Set every *name* declaration line in *manifests* to *spec*.

        Raises
        ------
        ManifestReadError
            When a manifest cannot be read.
        ManifestWriteError
            When a manifest cannot be written back.
        ManifestRewriteError
            When the substitution would turn a parsable manifest into an
            unparsable one.  That manifest is left untouched.
        """
        return [self._rewrite_one(manifest, name, spec) for manifest in manifests]

    def declarations(
        self,
        manifests: Iterable[ManifestFile],
        name: str,
    ) -> list[DependencyDeclaration]:
        """Return the current *name* declaration lines of *manifests*.

        Read-only.  Manifests without a matching line contribute nothing.
        """
        found: list[DependencyDeclaration] = []
        for manifest in manifests:
            text = self._read(manifest)
            found.extend(
                DependencyDeclaration(
                    manifest=manifest,
                    key=key,
                    value=value,
                    pinned=is_pinned(value),
                )
                for key, value in find_declarations(text, name)
            )
        return found

    # ------------------------------------------------------------------
    # Per-manifest pipeline
    # ------------------------------------------------------------------

    def _rewrite_one(
        self,
        manifest: ManifestFile,
        name: str,
        spec: DependencySpec,
    ) -> RewriteReport:
        original = self._read(manifest)
        result = substitute_dependency(original, name, spec.text)

        skipped = tuple(self._inspector.dependency_tables(original, name))

        changed = result.text != original
        if changed:
            if self._inspector.is_valid(original) and not self._inspector.is_valid(result.text):
                raise ManifestRewriteError(
                    manifest.path,
                    f"setting {name} to {spec.text} would leave the manifest unparsable",
                    hint=append_recovery_suggestion(
                        "The file was not modified; check the version or branch value.",
                    ),
                )
            self._write(manifest, result.text)

        return RewriteReport(
            manifest=manifest,
            keys=result.keys,
            changed=changed,
            skipped_tables=skipped,
        )

    # ------------------------------------------------------------------
    # Store delegation (safe boundary)
    # ------------------------------------------------------------------

    def _read(self, manifest: ManifestFile) -> str:
        try:
            return self._store.read(manifest)
        except DeptoolError:
            raise
        except Exception as exc:
            raise ManifestReadError(manifest.path, f"unexpected read error: {exc}") from exc

    def _write(self, manifest: ManifestFile, text: str) -> None:
        try:
            self._store.write(manifest, text)
        except DeptoolError:
            raise
        except Exception as exc:
            raise ManifestWriteError(
                manifest.path,
                f"unexpected write error: {exc}",
                hint=append_recovery_suggestion(None),
            ) from exc
