"""Fixed values shared across layers.

There is no configuration file and no environment lookup; everything the
tool needs to know about the repository layout is pinned here.
"""

from __future__ import annotations

PROG_NAME: str = "deptool"

LIB3H_DEPENDENCY: str = "lib3h"
"""Dependency key prefix rewritten by the ``lib3h`` command."""

LIB3H_REPO_URL: str = "https://github.com/holochain/lib3h"
"""Git remote used by ``deptool lib3h branch``."""

MANIFEST_NAME: str = "Cargo.toml"

REPO_ROOT_RELATIVE: str = "../.."
"""Repository root, relative to the tool's install directory."""

ZOMES_ROOT_RELATIVE: str = "../../app_spec/zomes"
"""App-spec zomes directory, relative to the tool's install directory."""

REPO_ROOT_DEPTH: int = 2
"""``<repo>/<crate>/Cargo.toml``"""

ZOMES_ROOT_DEPTH: int = 3
"""``<zomes>/<zome>/<code>/Cargo.toml``"""
