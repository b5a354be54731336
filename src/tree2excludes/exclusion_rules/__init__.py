"""Exclusion rules for skipping files and directories while walking a source tree."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
]
