"""Usage and contextual help texts, one per dispatch level.

Plain text only — render with ``console.print(text, markup=False)``.
"""

from __future__ import annotations

from deptool.utils.constants import LIB3H_REPO_URL

USAGE: str = "\n".join(
    (
        "holochain deptool - changing Cargo deps for testing",
        "usage: deptool [options] cmd",
        "commands:",
        "  lib3h - deptool lib3h <subcmd>",
        "    version - deptool lib3h version <version>",
        "    branch - deptool lib3h branch <branch-name>",
        "    show - deptool lib3h show",
        "options:",
        "  -h --help: additional help for command",
        "  -V --version: print the deptool version",
    )
)

LIB3H_HELP: str = "\n".join(
    (
        "deptool lib3h",
        " - alter lib3h dependencies in this repo",
        " - example: deptool lib3h version 0.0.9",
        " - example: deptool lib3h branch test-a",
        " - example: deptool lib3h show",
    )
)

LIB3H_VERSION_HELP: str = "\n".join(
    (
        "deptool lib3h version",
        " - set the various lib3h dep versions",
        " - example: deptool lib3h version 0.0.9",
        '   will set: lib3h = "=0.0.9"',
    )
)

LIB3H_BRANCH_HELP: str = "\n".join(
    (
        "deptool lib3h branch",
        " - set the various lib3h dep to a github branch",
        " - example: deptool lib3h branch test-a",
        f'   will set: lib3h = {{ git = "{LIB3H_REPO_URL}", branch = "test-a" }}',
    )
)

LIB3H_SHOW_HELP: str = "\n".join(
    (
        "deptool lib3h show",
        " - list the current lib3h dep of every located Cargo.toml",
        " - anything other than an exact \"=X.Y.Z\" pin is flagged as unpinned",
        " - exits 1 when any unpinned line is found, 0 otherwise",
    )
)
