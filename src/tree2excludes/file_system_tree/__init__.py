"""Directory trees of source code, both on disk and spanned by lists of relative paths."""

from .path_node import PathNode, build_path_tree
from .permission_action import PermissionAction
from .source_tree_walker import SourceTreeWalker

__all__ = [
    "PathNode",
    "PermissionAction",
    "SourceTreeWalker",
    "build_path_tree",
]
