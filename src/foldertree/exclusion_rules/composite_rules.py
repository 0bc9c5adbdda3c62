"""Stacking of several exclusion rule objects."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Leaves an entry out as soon as one of its member rules does.

    The scanner uses this to put caller-supplied gitignore patterns on top of the fixed
    noise rules. Members are asked in order and asking stops at the first exclusion.

    Attributes:
        rules (List[BaseExclusionRules]): Member rules, in the order they are asked.

    Example:
        >>> from foldertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from foldertree.exclusion_rules.noise_rules import NoiseExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("*.log")
        >>> rules = CompositeExclusionRules([NoiseExclusionRules(), git_rules])
        >>> [rules.exclude(path) for path in (".git/", "debug.log", "README.md")]
        [True, True, False]
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """
        Args:
            rules: Member rules, asked in the order given.

        Raises:
            ValueError: If rules is empty.
            TypeError: If a member is not a BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")
        for position, member in enumerate(rules):
            if not isinstance(member, BaseExclusionRules):
                raise TypeError(f"Rule at index {position} must implement BaseExclusionRules, got {type(member)}")
        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(member.exclude(path) for member in self.rules)

    def has_rules(self) -> bool:
        return any(member.has_rules() for member in self.rules)
