"""Fixtures shared by the output strategy tests."""

import pytest

from foldertree.folder_tree.scan_result import ScanResult
from foldertree.folder_tree.tree_node import EntryNode, TruncationMarker
from foldertree.types import NodeKind


@pytest.fixture
def sample_result():
    """A hand-built result: project/{src/{lib/{util.py}, main.py, ...}, docs/, README.md}."""
    root = EntryNode("project", "", NodeKind.FOLDER)
    src = EntryNode("src", "src", NodeKind.FOLDER, parent=root)
    lib = EntryNode("lib", "src/lib", NodeKind.FOLDER, parent=src)
    EntryNode("util.py", "src/lib/util.py", NodeKind.FILE, parent=lib)
    EntryNode("main.py", "src/main.py", NodeKind.FILE, parent=src)
    TruncationMarker("src/...", 7, parent=src)
    EntryNode("docs", "docs", NodeKind.FOLDER, parent=root)
    EntryNode("README.md", "README.md", NodeKind.FILE, parent=root)
    return ScanResult(root=root, path="/tmp/project", file_limit=3, count=7)


@pytest.fixture
def empty_result():
    return ScanResult(root=EntryNode("empty", "", NodeKind.FOLDER), path="/tmp/empty", file_limit=20, count=0)
