"""Unit tests for composite exclusion rules."""

import pytest

from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.exclusion_rules.composite_rules import CompositeExclusionRules
from foldertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from foldertree.exclusion_rules.noise_rules import NoiseExclusionRules


class MockExclusionRules(BaseExclusionRules):
    """Mock exclusion rules for testing."""

    def __init__(self, exclude_patterns=None, has_rules_result=True):
        self.exclude_patterns = exclude_patterns or []
        self.has_rules_result = has_rules_result
        self.calls = []

    def exclude(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.exclude_patterns

    def has_rules(self) -> bool:
        return self.has_rules_result


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_init_with_empty_rules(self):
        with pytest.raises(ValueError, match="At least one exclusion rule must be provided"):
            CompositeExclusionRules([])

    def test_init_with_invalid_rule_type(self):
        with pytest.raises(TypeError, match="Rule at index 1 must implement BaseExclusionRules"):
            CompositeExclusionRules([MockExclusionRules(), "invalid"])

    def test_exclude_any_match(self):
        composite = CompositeExclusionRules(
            [MockExclusionRules(["a.txt"]), MockExclusionRules(["b.txt"])]
        )
        assert composite.exclude("a.txt")
        assert composite.exclude("b.txt")
        assert not composite.exclude("c.txt")

    def test_exclude_short_circuits(self):
        first = MockExclusionRules(["a.txt"])
        second = MockExclusionRules()
        composite = CompositeExclusionRules([first, second])

        assert composite.exclude("a.txt")
        assert second.calls == []

    def test_has_rules(self):
        assert not CompositeExclusionRules([MockExclusionRules(has_rules_result=False)]).has_rules()
        assert CompositeExclusionRules(
            [MockExclusionRules(has_rules_result=False), MockExclusionRules(has_rules_result=True)]
        ).has_rules()

    def test_noise_and_git_rules(self):
        git_rules = GitIgnoreExclusionRules()
        git_rules.add_rule("build/")
        composite = CompositeExclusionRules([NoiseExclusionRules(), git_rules])

        assert composite.exclude("node_modules/")
        assert composite.exclude(".env")
        assert composite.exclude("build/")
        assert not composite.exclude("src/")
