"""Bounded folder tree scanning.

This package provides the node types of a scanned folder tree and the scanner that
builds them from a directory, applying per-directory file limits.
"""

from .folder_scanner import DEFAULT_FILE_LIMIT, MAX_FILE_LIMIT, MIN_FILE_LIMIT, FolderScanner
from .scan_result import ReadFailure, ScanResult
from .tree_node import EntryNode, TreeNode, TruncationMarker

__all__ = [
    "DEFAULT_FILE_LIMIT",
    "EntryNode",
    "FolderScanner",
    "MAX_FILE_LIMIT",
    "MIN_FILE_LIMIT",
    "ReadFailure",
    "ScanResult",
    "TreeNode",
    "TruncationMarker",
]
