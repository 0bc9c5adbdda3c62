"""Exclusion rules for filtering entries out of a folder scan."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .noise_rules import NOISE_NAMES, NoiseExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "NOISE_NAMES",
    "NoiseExclusionRules",
]
