from abc import ABC, abstractmethod
from typing import Sequence, Union

from tree2excludes.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that skip files and directories while walking a source tree.

    These rules decide which paths never reach the exclude generator at all, e.g. the
    ``.git`` directory or files listed in a ``.gitignore``. They are unrelated to the
    path excludes the generator proposes.

    Example:
        >>> from tree2excludes.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule(".git/")
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("src/main.c")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be skipped.

        Args:
            path (str): Forward-slash separated path relative to the walked directory.
                Directory paths carry a trailing slash.

        Returns:
            bool: True if the path should be skipped, False if it should be walked.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
