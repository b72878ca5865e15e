"""Filesystem-backed implementation of :class:`~deptool.core.protocols.ManifestStore`.

This module is the **only** place in the codebase that reads or writes
manifest files.  All ``OSError`` instances are caught here and re-raised
as :class:`~deptool.exceptions.ManifestIOError` subclasses.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile

from deptool.core.models import ManifestFile
from deptool.exceptions import (
    ManifestReadError,
    ManifestWriteError,
    append_recovery_suggestion,
)

_ENCODING = "utf-8"


class FileSystemManifestStore:
    """Concrete :class:`ManifestStore` reading and writing UTF-8 text files.

    Writes go to a temporary sibling file that is moved over the
    original, so a manifest is either fully rewritten or left as it was.
    Line endings are passed through untranslated.
    """

    def read(self, manifest: ManifestFile) -> str:
        """Return the text of *manifest*.

        Raises
        ------
        ManifestReadError
            If the file is missing, unreadable or not valid UTF-8.
        """
        try:
            with open(manifest.path, encoding=_ENCODING, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestReadError(
                manifest.path,
                f"cannot read manifest ({exc})",
            ) from exc

    def write(self, manifest: ManifestFile, text: str) -> None:
        """Atomically replace the content of *manifest* with *text*.

        The original's permission bits are kept.  A manifest that vanished
        since it was located is reported, not recreated.

        Raises
        ------
        ManifestWriteError
            If the temporary file cannot be created, filled or moved into
            place.  The original file is untouched in that case.
        """
        path = manifest.path
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding=_ENCODING, newline="") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            shutil.copymode(path, tmp_name)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise ManifestWriteError(
                path,
                f"cannot write manifest ({exc})",
                hint=append_recovery_suggestion(None),
            ) from exc
        finally:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
