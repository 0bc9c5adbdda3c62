"""Fixed exclusion of hidden entries and well-known noise directories."""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules

# Directories that are never worth showing in a folder structure
NOISE_NAMES: FrozenSet[str] = frozenset({"node_modules", ".git"})


class NoiseExclusionRules(BaseExclusionRules):
    """Exclude hidden entries (names starting with ".") and noise directory names.

    Only the last segment of the path is inspected, so an entry is excluded based on
    its own name regardless of where it sits in the tree. These rules take no
    configuration beyond the set of noise names.

    Attributes:
        noise_names (FrozenSet[str]): Entry names that are always excluded.

    Example:
        >>> rules = NoiseExclusionRules()
        >>> rules.exclude(".env")
        True
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("web/app.js")
        False
    """

    def __init__(self, noise_names: Iterable[str] = NOISE_NAMES) -> None:
        self.noise_names = frozenset(noise_names)

    def exclude(self, path: str) -> bool:
        name = path.rstrip("/").rsplit("/", 1)[-1]
        return name.startswith(".") or name in self.noise_names
