"""Caller-supplied exclusion patterns in .gitignore syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from foldertree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Extra entries to leave out of a scan, written as .gitignore patterns.

    Matching is done by pathspec with Git's own semantics: globs, "**", patterns
    ending in "/" that only match folders, "!" negations and "#" comments. Patterns
    accumulate across rules files and single additions, and a later pattern wins over
    an earlier one.

    Attributes:
        spec (GitIgnoreSpec): Matcher compiled from every pattern added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("dist/")
        >>> rules.add_rule("*.tmp")
        >>> [rules.exclude(path) for path in ("dist/", "cache/a.tmp", "src/")]
        [True, True, False]

    Note:
        Paths given to exclude() use forward slashes on every platform.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """
        Args:
            rules_files: Optional rules file, or files, to read patterns from.

        Raises:
            FileNotFoundError: If a rules file is missing.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)
        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more rules files, in file order.

        Raises:
            FileNotFoundError: If a rules file is missing. No patterns are added then.
        """
        paths = [Path(rules_files)] if isinstance(rules_files, (str, PathLike)) else [Path(p) for p in rules_files]
        missing = [p for p in paths if not p.is_file()]
        if missing:
            raise FileNotFoundError(f"Rules file not found: {missing[0]}")

        for rules_path in paths:
            self._lines.extend(rules_path.read_text(encoding="utf-8").splitlines())
        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append one pattern such as "*.log", "dist/" or "!keep.log"."""
        self._lines.append(rule)
        self._compile()

    def has_rules(self) -> bool:
        return any(line.strip() and not line.lstrip().startswith("#") for line in self._lines)

    def _compile(self) -> None:
        self.spec = GitIgnoreSpec.from_lines(self._lines)
