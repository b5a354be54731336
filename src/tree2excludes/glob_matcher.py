"""Wildcard matching of single path segments.

Rule patterns only know a single wildcard: ``*`` matches zero or more characters.
Every other character, including ``?`` and brackets, is matched literally.
"""

import re
from functools import lru_cache
from typing import Pattern


def translate(pattern: str, within_segment: bool = False) -> str:
    """Translate a wildcard pattern into a regular expression.

    Args:
        pattern: A single path segment where ``*`` stands for any run of characters.
        within_segment: Whether ``*`` must not match a ``/``. Use this to join several
            translated segments into a regular expression for a whole path.

    Example:
        >>> translate("*test*")
        '.*test.*'
        >>> translate("*test*", within_segment=True)
        '[^/]*test[^/]*'
    """
    wildcard = "[^/]*" if within_segment else ".*"
    return wildcard.join(re.escape(part) for part in pattern.split("*"))


@lru_cache(maxsize=1024)
def _compile(pattern: str, ignore_case: bool) -> Pattern[str]:
    flags = re.DOTALL | re.IGNORECASE if ignore_case else re.DOTALL
    return re.compile(translate(pattern), flags)


def matches(pattern: str, text: str, ignore_case: bool = False) -> bool:
    """Check whether a wildcard pattern matches the whole of a name.

    Args:
        pattern: A single path segment where ``*`` stands for any run of characters.
        text: The name to test, typically a file or directory basename.
        ignore_case: Whether letters are compared case-insensitively.

    Returns:
        bool: True if the pattern matches the entire text.

    Example:
        >>> matches("*test*", "unit-tests")
        True
        >>> matches("*.gradle", "build.gradle.kts")
        False
        >>> matches("docs", "Docs")
        False
        >>> matches("docs", "Docs", ignore_case=True)
        True
    """
    return _compile(pattern, ignore_case).fullmatch(text) is not None
