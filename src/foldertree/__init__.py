"""Bounded folder-structure scanning.

This package turns a directory subtree into a size-limited, serializable tree,
after checking the requested path against an allow-list policy.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("foldertree")
except PackageNotFoundError:
    __version__ = "unknown"
