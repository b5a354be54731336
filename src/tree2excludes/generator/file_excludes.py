"""Generation of path excludes for individual files identified by their names."""

import logging
from typing import Collection, Dict, FrozenSet, Iterable, List, Optional, Set

from tree2excludes.glob_matcher import matches
from tree2excludes.path_exclude import PathExclude
from tree2excludes.rules.rule_tables import FILE_RULES

from .set_cover import greedy_set_cover

logger = logging.getLogger(__name__)


def get_common_directory(directories: Iterable[str]) -> str:
    """Return the longest directory path that contains all given directories.

    Example:
        >>> get_common_directory(["app/src", "app/src/main", "app/lib"])
        'app'
        >>> get_common_directory(["app", "lib"])
        ''
    """
    common: Optional[List[str]] = None
    for directory in directories:
        segments = directory.split("/") if directory else []
        if common is None:
            common = segments
            continue

        length = 0
        for ours, theirs in zip(common, segments):
            if ours != theirs:
                break
            length += 1
        common = common[:length]

    return "/".join(common or [])


def create_exclude_pattern(filename_pattern: str, files: Collection[str]) -> Optional[str]:
    """Synthesize a single exclude pattern for all files whose name matches a file rule pattern.

    The pattern is rooted at the common directory of the matching files. It uses the literal
    file name if all matching files share it and the rule pattern otherwise, and it matches
    subdirectories if the files do not all live in the same directory.

    Args:
        filename_pattern: The single-segment pattern of a file rule, matched case-sensitively.
        files: Relative paths of the candidate files.

    Returns:
        Optional[str]: The exclude pattern, or None if no file matches.

    Example:
        >>> create_exclude_pattern("*.gradle", ["build.gradle", "app/build.gradle", "src/Main.java"])
        '**/build.gradle'
        >>> create_exclude_pattern("*.mk", ["lib/a.mk", "lib/b.mk"])
        'lib/*.mk'
        >>> create_exclude_pattern("*.mk", ["src/main.c"]) is None
        True
    """
    split_files = (path.rpartition("/") for path in files)
    matching = [(parent, name) for parent, _, name in split_files if matches(filename_pattern, name)]
    if not matching:
        return None

    parents = {parent for parent, _ in matching}
    names = {name for _, name in matching}

    directory = get_common_directory(parents)
    file_name = next(iter(names)) if len(names) == 1 else filename_pattern
    match_subdirectories = len(parents) > 1

    prefix = f"{directory}/" if directory else ""
    wildcard = "**/" if match_subdirectories else ""
    return f"{prefix}{wildcard}{file_name}"


def generate_file_excludes(paths: Iterable[str]) -> Set[PathExclude]:
    """Return excludes for files whose names indicate build tooling, documentation or tests.

    Every file rule contributes at most one candidate exclude, synthesized from all files
    matching the rule by :func:`create_exclude_pattern`. Because a candidate is rooted at
    the common directory of its files, it may match more files than the ones that triggered
    it. The final excludes are a greedy set cover of the files matched by the candidates.

    Args:
        paths: File paths relative to the root of the source tree.

    Returns:
        Set[PathExclude]: The selected file excludes.

    Example:
        >>> sorted(generate_file_excludes(["build.gradle", "app/build.gradle", "lib/build.gradle"]))
        [PathExclude(pattern='**/build.gradle', reason=<ExcludeReason.BUILD_TOOL: 'BUILD_TOOL_OF'>)]
    """
    files = set(paths)

    candidates = set()
    for rule in FILE_RULES:
        pattern = create_exclude_pattern(rule.pattern, files)
        if pattern is not None:
            logger.debug("File rule '%s' yields candidate '%s'", rule.pattern, pattern)
            candidates.add(PathExclude(pattern, rule.reason))

    covered_files: Dict[PathExclude, FrozenSet[str]] = {
        candidate: frozenset(path for path in files if candidate.matches(path)) for candidate in candidates
    }

    return set(greedy_set_cover(covered_files))
