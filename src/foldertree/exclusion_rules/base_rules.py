from abc import ABC, abstractmethod
from typing import Sequence, Union

from foldertree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules deciding which entries a scan leaves out.

    Implementations receive the entry's path relative to the scan root, using forward
    slashes. Directory paths carry a trailing slash so that directory-only patterns
    (such as gitignore's ``build/``) can match them. Rule types built from patterns
    also accept patterns from files and one at a time; fixed rule types refuse both.

    Example:
        >>> from foldertree.exclusion_rules.noise_rules import NoiseExclusionRules
        >>> rules = NoiseExclusionRules()
        >>> rules.exclude("src/.env")
        True
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if an entry should be left out of the scan.

        Args:
            path (str): Path of the entry relative to the scan root. Directories end with "/".

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Read patterns from one or more rules files.

        Raises:
            NotImplementedError: For rule types that are not pattern based.
            FileNotFoundError: If a rules file is missing.
        """
        raise NotImplementedError(f"{self.__class__.__name__} has fixed rules and cannot read rules files")

    def add_rule(self, rule: str) -> None:
        """
        Append one pattern.

        Raises:
            NotImplementedError: For rule types that are not pattern based.
        """
        raise NotImplementedError(f"{self.__class__.__name__} has fixed rules and cannot take patterns")

    def has_rules(self) -> bool:
        """Whether any rule is configured. Fixed rule types always report True."""
        return True
