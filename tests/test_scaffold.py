"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from deptool import __version__
from deptool.cli import exit_codes
from deptool.exceptions import (
    DeptoolError,
    ManifestIOError,
    ManifestReadError,
    ManifestRewriteError,
    ManifestWriteError,
    UsageError,
    append_recovery_suggestion,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            ManifestIOError,
            ManifestReadError,
            ManifestWriteError,
            ManifestRewriteError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[DeptoolError]
    ) -> None:
        assert issubclass(exc_class, DeptoolError)

    def test_read_and_write_errors_are_io_errors(self) -> None:
        assert issubclass(ManifestReadError, ManifestIOError)
        assert issubclass(ManifestWriteError, ManifestIOError)

    def test_hint_is_stored(self) -> None:
        err = DeptoolError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert DeptoolError("boom").hint is None

    def test_usage_error_carries_usage(self) -> None:
        err = UsageError("bad", usage="usage: deptool")
        assert err.usage == "usage: deptool"
        assert err.hint is None

    def test_io_error_names_the_path(self) -> None:
        err = ManifestWriteError(Path("/repo/core/Cargo.toml"), "permission denied")
        assert err.path == Path("/repo/core/Cargo.toml")
        assert str(err).startswith("/repo/core/Cargo.toml")
        assert "permission denied" in str(err)


class TestRecoverySuggestion:
    def test_appended_to_existing_hint(self) -> None:
        result = append_recovery_suggestion("Check permissions.")
        assert result.startswith("Check permissions.")
        assert "git checkout" in result

    def test_without_hint(self) -> None:
        assert "git checkout" in append_recovery_suggestion(None)

    def test_appended_only_once(self) -> None:
        once = append_recovery_suggestion("x")
        assert append_recovery_suggestion(once) == once


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_usage_error_is_one(self) -> None:
        assert exit_codes.USAGE_ERROR == 1

    def test_help_is_non_zero(self) -> None:
        assert exit_codes.HELP_SHOWN == 1

    def test_unpinned_found_is_non_zero(self) -> None:
        assert exit_codes.UNPINNED_FOUND == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    def test_cli_is_callable(self) -> None:
        from deptool.cli.app import cli, main

        assert callable(cli)
        assert callable(main)

    def test_version_flag(self) -> None:
        from deptool.cli.app import main

        assert main(["--version"]) == exit_codes.SUCCESS

    def test_version_flag_prints_program_name(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from deptool.cli.app import main

        assert main(["-V"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == f"deptool {__version__}\n"

    def test_version_wins_over_commands(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from deptool.cli.app import main

        with patch("deptool.cli.lib3h.locate_manifests") as mock_locate:
            assert main(["lib3h", "version", "0.0.9", "-V"]) == exit_codes.SUCCESS
        mock_locate.assert_not_called()
        assert capsys.readouterr().out == f"deptool {__version__}\n"
