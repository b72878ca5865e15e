"""deptool — rewrite Cargo dependency lines across a repository checkout.

Pins the ``lib3h`` dependency to an exact version or points it at a git
branch in every located ``Cargo.toml``.
"""

from deptool.version import __version__

__all__: list[str] = ["__version__"]
