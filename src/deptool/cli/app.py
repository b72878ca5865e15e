"""CLI application entry point and command routing for deptool.

This module is the **sole error boundary** for the entire application.
It catches :class:`~deptool.exceptions.DeptoolError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Usage errors are reported before any manifest is located or read.
* ``-h``/``--help`` may appear anywhere before ``--`` and selects the help
  of the deepest command level reached.  It exits non-zero, as existing
  callers expect.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from deptool.cli import exit_codes, help_text
from deptool.cli.console import console
from deptool.core.models import DependencySpec
from deptool.exceptions import DeptoolError, UsageError
from deptool.utils.constants import PROG_NAME
from deptool.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports problems as :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=help_text.USAGE)


@dataclass(frozen=True, slots=True)
class ParsedArgs:
    """Result of option parsing: the help and version flags and ordered positionals."""

    help: bool
    positionals: tuple[str, ...]
    version: bool = False


def _build_parser() -> argparse.ArgumentParser:
    """Construct the option parser.

    Only options are declared; positionals are dispatched by hand so that
    ``-h`` can be interleaved with commands at any level.
    """
    parser = _ArgumentParser(
        prog=PROG_NAME,
        description="Change Cargo dependencies across the repository for testing.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true", dest="help")
    parser.add_argument("-V", "--version", action="store_true", dest="version")
    return parser


def parse_args(argv: list[str]) -> ParsedArgs:
    """Split *argv* into the help flag and positional arguments.

    Everything after the first ``--`` is positional.  Any other
    dash-prefixed argument is an unsupported option.

    Raises
    ------
    UsageError
        For an unsupported option.
    """
    if "--" in argv:
        split = argv.index("--")
        head, tail = argv[:split], argv[split + 1:]
    else:
        head, tail = argv, []

    namespace, extras = _build_parser().parse_known_args(head)
    for arg in extras:
        if arg.startswith("-") and arg != "-":
            raise UsageError(f"Unsupported option {arg}")

    return ParsedArgs(
        help=namespace.help,
        positionals=(*extras, *tail),
        version=namespace.version,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _print_help(text: str) -> int:
    console.print(text, markup=False)
    return exit_codes.HELP_SHOWN


def _single_value(rest: tuple[str, ...], what: str, usage: str) -> str:
    """Return the one value argument of a subcommand."""
    if not rest:
        raise UsageError(f"missing {what} value", usage=usage)
    if len(rest) > 1:
        raise UsageError(f"unexpected argument '{rest[1]}'", usage=usage)
    return rest[0]


def _handle_lib3h(args: tuple[str, ...], *, show_help: bool, install_dir: Path | None) -> int:
    """Dispatch ``deptool lib3h <subcommand>``."""
    from deptool.core.spec_builder import branch_spec, version_spec

    sub = args[0] if args else None
    rest = args[1:]

    if sub == "version":
        if show_help:
            return _print_help(help_text.LIB3H_VERSION_HELP)
        spec = version_spec(_single_value(rest, "version", help_text.LIB3H_VERSION_HELP))
        return _run_rewrite(spec, install_dir)

    if sub == "branch":
        if show_help:
            return _print_help(help_text.LIB3H_BRANCH_HELP)
        spec = branch_spec(_single_value(rest, "branch", help_text.LIB3H_BRANCH_HELP))
        return _run_rewrite(spec, install_dir)

    if sub == "show":
        if show_help:
            return _print_help(help_text.LIB3H_SHOW_HELP)
        if rest:
            raise UsageError(f"unexpected argument '{rest[0]}'", usage=help_text.LIB3H_SHOW_HELP)
        from deptool.cli.lib3h import run_show

        return run_show(_install_dir(install_dir))

    if show_help or sub is None:
        console.print(help_text.LIB3H_HELP, markup=False)
        return exit_codes.HELP_SHOWN if show_help else exit_codes.USAGE_ERROR

    raise UsageError(f"unexpected lib3h subcommand '{sub}'", usage=help_text.USAGE)


def _run_rewrite(spec: DependencySpec, install_dir: Path | None) -> int:
    from deptool.cli.lib3h import run_rewrite

    return run_rewrite(spec, _install_dir(install_dir))


def _install_dir(install_dir: Path | None) -> Path:
    if install_dir is not None:
        return install_dir
    from deptool.infra.manifest_locator import resolve_install_dir

    return resolve_install_dir()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, install_dir: Path | None = None) -> int:
    """Run the deptool CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    install_dir:
        Directory the search roots are resolved from.  Defaults to the
        deptool checkout (see
        :func:`~deptool.infra.manifest_locator.resolve_install_dir`).

    Returns
    -------
    int
        OS process exit code.
    """
    try:
        parsed = parse_args(list(sys.argv[1:] if argv is None else argv))
        if parsed.version:
            print(f"{PROG_NAME} {__version__}")
            return exit_codes.SUCCESS

        command = parsed.positionals[0] if parsed.positionals else None

        if command == "lib3h":
            return _handle_lib3h(
                parsed.positionals[1:],
                show_help=parsed.help,
                install_dir=install_dir,
            )
        if command is None and parsed.help:
            return _print_help(help_text.USAGE)

        raise UsageError(f"unexpected command '{command or '<unset>'}'", usage=help_text.USAGE)
    except UsageError as exc:
        console.print(f"Error: {exc}", markup=False)
        if exc.usage:
            console.print(exc.usage, markup=False)
        return exit_codes.USAGE_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DeptoolError as exc:
        console.print(f"Error: {exc}", markup=False)
        if exc.hint:
            console.print(f"Hint: {exc.hint}", markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
