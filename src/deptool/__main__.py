"""Allow ``python -m deptool`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m deptool`` behaves identically to the ``deptool``
console script.
"""

from __future__ import annotations

from deptool.cli.app import cli

if __name__ == "__main__":
    cli()
