"""Unit tests for the fixed hidden/noise exclusion rules."""

import pytest

from foldertree.exclusion_rules.noise_rules import NOISE_NAMES, NoiseExclusionRules


@pytest.mark.parametrize(
    "path,expected",
    [
        (".env", True),
        (".git/", True),
        ("node_modules/", True),
        ("web/node_modules/", True),
        ("src/.cache/", True),
        ("src/.hidden.txt", True),
        ("src/", False),
        ("a.txt", False),
        ("src/main.py", False),
        # Only the entry's own name matters
        ("node_modules_backup/", False),
        ("docs/env.", False),
    ],
)
def test_exclude(path, expected):
    assert NoiseExclusionRules().exclude(path) is expected


def test_default_noise_names():
    assert NOISE_NAMES == frozenset({"node_modules", ".git"})


def test_custom_noise_names():
    rules = NoiseExclusionRules(["target"])
    assert rules.exclude("target/")
    assert not rules.exclude("node_modules/")
    # Hidden entries are always excluded
    assert rules.exclude(".venv/")


def test_has_rules():
    assert NoiseExclusionRules().has_rules() is True


def test_unsupported_operations():
    rules = NoiseExclusionRules()
    with pytest.raises(NotImplementedError, match="cannot take patterns"):
        rules.add_rule("*.log")
    with pytest.raises(NotImplementedError, match="cannot read rules files"):
        rules.load_rules("rules.txt")
