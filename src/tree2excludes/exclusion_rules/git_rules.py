"""Implementation of exclusion rules using .gitignore pattern syntax."""

import logging
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from tree2excludes.types import PathType

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them,
    including negations (``!``), directory markers (trailing ``/``) and ``**``.
    Rules from files and rules added individually are combined in the order they
    were added, so later negations can re-include earlier matches.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("debug.log"), rules.exclude("keep.log")
        (True, False)
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            logger.debug("Loaded %d line(s) of exclusion rules from %s", len(lines), path)
            self._extend(lines)

    def add_rule(self, rule: str) -> None:
        self._extend([rule])

    def _extend(self, lines: List[str]) -> None:
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)
