"""Path exclude values produced by the generator."""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Pattern

from tree2excludes.glob_matcher import translate
from tree2excludes.types import ExcludeReason


@lru_cache(maxsize=1024)
def _compile_pattern(pattern: str) -> Pattern[str]:
    """Translate an exclude pattern into a regular expression for whole relative paths."""
    segments = pattern.split("/")
    parts: List[str] = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        if segment == "**":
            # Zero or more whole directories, or everything below when trailing
            parts.append(".+" if last else "(?:[^/]+/)*")
        else:
            parts.append(translate(segment, within_segment=True) + ("" if last else "/"))
    return re.compile("".join(parts), re.DOTALL)


@dataclass(frozen=True, order=True)
class PathExclude:
    """A glob pattern describing paths to exclude, together with the reason for excluding them.

    Patterns use ``/`` as separator and are relative to the root of the source tree. A ``*``
    matches any run of characters within a single path segment and a ``**`` segment matches
    zero or more whole directories. A pattern always has to match the complete path; it does
    not match the contents of a directory it happens to name. Matching is case-sensitive.

    Instances are immutable, hashable and ordered by pattern, then reason, which gives
    generated excludes a stable presentation order.

    Attributes:
        pattern (str): The glob pattern, e.g. ``docs/**`` or ``**/build.gradle``.
        reason (ExcludeReason): Why paths matching the pattern are excluded.

    Example:
        >>> exclude = PathExclude("docs/**", ExcludeReason.DOCUMENTATION)
        >>> exclude.matches("docs/sub/guide.md")
        True
        >>> exclude.matches("src/docs.c")
        False
        >>> PathExclude("**/build.gradle", ExcludeReason.BUILD_TOOL).matches("build.gradle")
        True
        >>> PathExclude("**/CHANGELOG*", ExcludeReason.BUILD_TOOL).matches("CHANGELOG.d/a.mk")
        False
    """

    pattern: str
    reason: ExcludeReason

    def matches(self, path: str) -> bool:
        """Check whether a relative path is covered by this exclude.

        Args:
            path: A forward-slash separated path relative to the source tree root.

        Returns:
            bool: True if the pattern matches the path.
        """
        return _compile_pattern(self.pattern).fullmatch(path) is not None
