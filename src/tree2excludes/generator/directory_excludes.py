"""Generation of path excludes that cover whole directories."""

import logging
from typing import Dict, Iterable, Set

from anytree import PreOrderIter

from tree2excludes.file_system_tree.path_node import PathNode, build_path_tree
from tree2excludes.path_exclude import PathExclude
from tree2excludes.rules.rule_tables import DIRECTORY_RULES, find_rule
from tree2excludes.types import ExcludeReason

logger = logging.getLogger(__name__)


def generate_directory_excludes(paths: Iterable[str]) -> Set[PathExclude]:
    """Return excludes for directories that very likely do not contain licensable source code.

    Each directory of the tree spanned by the paths is matched by its name against the
    directory rules, in table order and ignoring case. A matched directory only yields an
    exclude if none of its ancestors was matched as well, since the recursive exclude of
    the ancestor already covers it.

    Args:
        paths: File paths relative to the root of the source tree.

    Returns:
        Set[PathExclude]: One ``<dir>/**`` exclude per topmost matched directory.

    Example:
        >>> sorted(generate_directory_excludes(["docs/a.md", "docs/sub/b.md", "src/main.c"]))
        [PathExclude(pattern='docs/**', reason=<ExcludeReason.DOCUMENTATION: 'DOCUMENTATION_OF'>)]
    """
    root = build_path_tree(paths)
    matched_dirs: Dict[PathNode, ExcludeReason] = {}

    for node in PreOrderIter(root, filter_=lambda n: n.is_dir and n is not root):
        rule = find_rule(node.name, DIRECTORY_RULES, ignore_case=True)
        if rule is not None:
            logger.debug("Directory '%s' matches rule '%s'", node.relative_path, rule.pattern)
            matched_dirs[node] = rule.reason

    result = set()
    for node, reason in matched_dirs.items():
        if any(ancestor in matched_dirs for ancestor in node.ancestors):
            continue

        result.add(PathExclude(f"{node.relative_path}/**", reason))

    logger.debug("Generated %d directory exclude(s) from %d matched directories", len(result), len(matched_dirs))
    return result
