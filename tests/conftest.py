"""Test configuration and fixtures for foldertree."""

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files and folders under tmp_path from a list of relative paths.

    Paths ending in "/" become folders; everything else becomes an empty file.
    Returns tmp_path.
    """

    def _make(paths):
        for rel in paths:
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.touch()
        return tmp_path

    return _make
