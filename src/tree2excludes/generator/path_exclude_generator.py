"""Generation of path excludes for a complete source tree."""

import logging
import re
from typing import Iterable, Set

from tree2excludes.exceptions import InvalidInputError
from tree2excludes.path_exclude import PathExclude
from tree2excludes.types import RelativePath

from .directory_excludes import generate_directory_excludes
from .file_excludes import generate_file_excludes

logger = logging.getLogger(__name__)

_DRIVE_LETTER = re.compile(r"^[A-Za-z]:")


def validate_relative_path(path: RelativePath) -> None:
    """Check that a path is a forward-slash separated path relative to the tree root.

    Raises:
        InvalidInputError: If the path is empty, absolute, contains backslashes, or has empty,
            ``.`` or ``..`` segments.

    Example:
        >>> validate_relative_path("src/main.c")
        >>> validate_relative_path("a/../b")
        Traceback (most recent call last):
        ...
        tree2excludes.exceptions.InvalidInputError: Invalid relative path 'a/../b': '..' segments are not supported
    """
    if not isinstance(path, str) or not path:
        raise InvalidInputError(str(path), "paths must be non-empty strings")
    if path.startswith("/") or _DRIVE_LETTER.match(path):
        raise InvalidInputError(path, "absolute paths are not supported")
    if "\\" in path:
        raise InvalidInputError(path, "paths must use '/' as separator")

    for segment in path.split("/"):
        if not segment:
            raise InvalidInputError(path, "paths must not contain empty segments")
        if segment in (".", ".."):
            raise InvalidInputError(path, f"'{segment}' segments are not supported")


def generate_path_excludes(paths: Iterable[RelativePath]) -> Set[PathExclude]:
    """Return path excludes which likely, but not necessarily, apply to a source tree.

    Directory excludes are generated first. Files covered by one of them are left out when
    generating the file excludes, so no file is excluded twice for the same reason.

    Args:
        paths: All file paths of the source tree, relative to its root directory.

    Returns:
        Set[PathExclude]: The union of directory and file excludes. Empty if nothing in the
            tree looks like build tooling, documentation or tests.

    Raises:
        InvalidInputError: If any path is not a valid relative path.

    Example:
        >>> sorted(e.pattern for e in generate_path_excludes(["tests/foo_test.go", "pom.xml", "Makefile"]))
        ['Makefile', 'tests/**']
    """
    files = set()
    for path in paths:
        validate_relative_path(path)
        files.add(path)

    directory_excludes = generate_directory_excludes(files)
    remaining_files = {path for path in files if not any(exclude.matches(path) for exclude in directory_excludes)}
    file_excludes = generate_file_excludes(remaining_files)

    logger.info(
        "Generated %d directory and %d file exclude(s) for %d path(s)",
        len(directory_excludes),
        len(file_excludes),
        len(files),
    )
    return directory_excludes | file_excludes
