"""``deptool lib3h`` — rewrite or list the lib3h dependency of every manifest.

This module lives in the CLI layer — it wires the infra adapters into the
core service and renders the resulting reports.  No substitution logic
resides here.
"""

from __future__ import annotations

import sys
from pathlib import Path

from deptool.cli import exit_codes
from deptool.cli.console import console
from deptool.core.models import DependencyDeclaration, DependencySpec, ManifestFile, RewriteReport
from deptool.core.rewrite_service import DependencyRewriteService
from deptool.infra.manifest_locator import default_scope, locate_manifests
from deptool.infra.manifest_store import FileSystemManifestStore
from deptool.infra.toml_inspector import TomlManifestInspector
from deptool.utils.constants import LIB3H_DEPENDENCY, MANIFEST_NAME


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _build_service() -> DependencyRewriteService:
    return DependencyRewriteService(FileSystemManifestStore(), TomlManifestInspector())


def _locate(install_dir: Path) -> tuple[ManifestFile, ...]:
    scope = default_scope(install_dir)
    manifests = locate_manifests(scope)
    if not manifests:
        roots = ", ".join(str(root.directory) for root in scope.roots)
        console.print(f"Warning: no {MANIFEST_NAME} found under {roots}", markup=False)
    return manifests


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_report(report: RewriteReport) -> None:
    path = report.manifest.path
    if report.changed:
        console.print(f"updated {path} ({', '.join(report.keys)})", markup=False)
    elif report.keys:
        console.print(f"unchanged {path} (already set)", markup=False)

    for table in report.skipped_tables:
        console.print(
            f"Warning: {path}: [{table}] is declared as a table and was not rewritten",
            markup=False,
        )


def _print_plain_declarations(declarations: list[DependencyDeclaration]) -> None:
    """Render ``show`` output without Rich."""
    for decl in declarations:
        status = "pinned" if decl.pinned else "UNPINNED"
        print(f"{status:<9} {decl.manifest.path}  {decl.key} = {decl.value}", file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def run_rewrite(spec: DependencySpec, install_dir: Path) -> int:
    """Set the lib3h dependency of every located manifest to *spec*.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`, including when nothing matched.
        I/O and integrity failures propagate as
        :class:`~deptool.exceptions.DeptoolError` to the CLI boundary.
    """
    console.print(f"setting {LIB3H_DEPENDENCY} deps to {spec.text}", markup=False)

    manifests = _locate(install_dir)
    for manifest in manifests:
        console.print(str(manifest.path), markup=False)
    if not manifests:
        return exit_codes.SUCCESS

    reports = _build_service().rewrite(manifests, LIB3H_DEPENDENCY, spec)
    for report in reports:
        _render_report(report)

    if not any(report.keys for report in reports):
        console.print(
            f"[yellow]Warning:[/yellow] no {LIB3H_DEPENDENCY} dependency lines matched; "
            "nothing was changed",
        )
    return exit_codes.SUCCESS


def run_show(install_dir: Path) -> int:
    """List the current lib3h declaration of every located manifest.

    Read-only.

    Returns
    -------
    int
        :data:`exit_codes.UNPINNED_FOUND` when any declaration is not an
        exact ``"=X.Y.Z"`` pin, otherwise :data:`exit_codes.SUCCESS`.
    """
    manifests = _locate(install_dir)
    declarations = _build_service().declarations(manifests, LIB3H_DEPENDENCY)
    if not declarations:
        if manifests:
            console.print(
                f"[yellow]Warning:[/yellow] no {LIB3H_DEPENDENCY} dependency lines found",
            )
        return exit_codes.SUCCESS

    rich_available = True
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title=f"{LIB3H_DEPENDENCY} dependencies",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Manifest", style="bold", overflow="fold")
        table.add_column("Key")
        table.add_column("Value", overflow="fold")
        table.add_column("Status", justify="center", min_width=8)

        for decl in declarations:
            status = "[green]pinned[/green]" if decl.pinned else "[yellow]UNPINNED[/yellow]"
            table.add_row(Text(str(decl.manifest.path)), Text(decl.key), Text(decl.value), status)

        console.print(table)
    else:
        _print_plain_declarations(declarations)

    unpinned = sum(1 for decl in declarations if not decl.pinned)
    if unpinned:
        console.print(f"[yellow]{unpinned} unpinned {LIB3H_DEPENDENCY} dependency line(s).[/yellow]")
        return exit_codes.UNPINNED_FOUND
    return exit_codes.SUCCESS
