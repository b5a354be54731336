"""Node representation for the directory tree spanned by a list of relative paths."""

from typing import Any, Dict, Iterable, Optional

from anytree import Node


class PathNode(Node):  # type: ignore
    """Node class representing a file or directory of a source tree.

    Extends anytree.Node with a flag telling directories from files and with the
    forward-slash separated path of the node relative to the tree root.

    Attributes:
        name (str): The basename of the file or directory.
        parent (Optional[PathNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.
        relative_path (str): Path from the root to this node, empty for the root itself.

    Example:
        >>> root = PathNode("", is_dir=True)
        >>> docs = PathNode("docs", parent=root, is_dir=True)
        >>> PathNode("guide.md", parent=docs).relative_path
        'docs/guide.md'
    """

    def __init__(self, name: str, parent: Optional["PathNode"] = None, is_dir: bool = False, **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir

    @property
    def relative_path(self) -> str:
        # The root node carries no name of its own
        return "/".join(node.name for node in self.path[1:])


def build_path_tree(paths: Iterable[str]) -> PathNode:
    """Build a tree of directory and file nodes from relative file paths.

    Every proper ancestor directory of every path becomes exactly one directory node,
    no matter how many paths share it. The returned root stands for the tree root and
    is not itself part of any path.

    Args:
        paths: Forward-slash separated file paths relative to the tree root.

    Returns:
        PathNode: The root node of the tree.

    Example:
        >>> root = build_path_tree(["docs/a.md", "docs/sub/b.md", "README"])
        >>> sorted(node.relative_path for node in root.descendants if node.is_dir)
        ['docs', 'docs/sub']
    """
    root = PathNode("", is_dir=True)
    directories: Dict[str, PathNode] = {"": root}

    for path in paths:
        *dir_names, file_name = path.split("/")

        parent = root
        dir_path = ""
        for dir_name in dir_names:
            dir_path = f"{dir_path}/{dir_name}" if dir_path else dir_name
            node = directories.get(dir_path)
            if node is None:
                node = PathNode(dir_name, parent=parent, is_dir=True)
                directories[dir_path] = node
            parent = node

        PathNode(file_name, parent=parent)

    return root
