"""Shared pytest fixtures and configuration for the deptool test suite.

Guidelines
----------
* No network access in any test.
* Filesystem tests build a throwaway repository under ``tmp_path``.
* Core tests must be pure — the manifest store is faked.
* Tests must not depend on the caller's working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

CORE_MANIFEST = """\
[package]
name = "holochain_core"
version = "0.0.1"

[dependencies]
serde = "=1.0.89"
lib3h = "=0.0.1"
lib3h_protocol = "=0.0.1"
otherlib3hthing = "=2.0.0"
"""

CLI_MANIFEST = """\
[package]
name = "hc"

[dependencies]
structopt = "=0.2.15"
"""

ZOME_MANIFEST = """\
[package]
name = "blog"

[dependencies]
lib3h_sodium = { git = "https://github.com/holochain/lib3h", branch = "old" }
"""

TABLE_MANIFEST = """\
[package]
name = "net"

[dependencies]
url = "=1.7.2"

[dependencies.lib3h]
version = "=0.0.1"
features = ["sodium"]
"""


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


@pytest.fixture()
def repo(tmp_path: Path) -> Path:
    """A repository checkout with manifests at, above and below the scanned depths.

    Layout::

        repo/core/Cargo.toml                       located (lib3h lines)
        repo/cli/Cargo.toml                        located (no lib3h)
        repo/app_spec/zomes/blog/code/Cargo.toml   located (zome)
        repo/crates/nested/Cargo.toml              too deep for the repo root
        repo/app_spec/zomes/blog/Cargo.toml        too shallow for the zomes root
        repo/test/deptool/                         install directory
    """
    root = tmp_path / "repo"
    write(root / "core" / "Cargo.toml", CORE_MANIFEST)
    write(root / "cli" / "Cargo.toml", CLI_MANIFEST)
    write(root / "app_spec" / "zomes" / "blog" / "code" / "Cargo.toml", ZOME_MANIFEST)
    write(root / "crates" / "nested" / "Cargo.toml", CORE_MANIFEST)
    write(root / "app_spec" / "zomes" / "blog" / "Cargo.toml", CORE_MANIFEST)
    (root / "test" / "deptool").mkdir(parents=True)
    return root


@pytest.fixture()
def install_dir(repo: Path) -> Path:
    return repo / "test" / "deptool"
