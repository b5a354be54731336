"""Collection of the relative file paths of a source tree on disk."""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from tree2excludes.exclusion_rules.base_rules import BaseExclusionRules
from tree2excludes.file_system_tree.permission_action import PermissionAction
from tree2excludes.types import PathType

logger = logging.getLogger(__name__)


class SourceTreeWalker:
    """Walks a directory and yields the paths of its files relative to the directory.

    Paths use forward slashes on every platform, which is the form the exclude generator
    expects. Directories and files matched by the exclusion rules are skipped; a skipped
    directory is not descended into. Symbolic links are reported like files and never
    followed, so the walk cannot loop.

    Attributes:
        root_path (Path): The directory to walk.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for skipping paths.
        permission_action (PermissionAction): How to handle unreadable directories.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     os.makedirs(os.path.join(tmpdir, "docs"))
        ...     for name in ("README", os.path.join("docs", "guide.md")):
        ...         with open(os.path.join(tmpdir, name), "w") as f:
        ...             _ = f.write("text")
        ...     SourceTreeWalker(tmpdir).get_file_paths()
        ['README', 'docs/guide.md']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
    ) -> None:
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.permission_action = permission_action

    def get_file_paths(self) -> List[str]:
        """Return the sorted relative paths of all files in the tree.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If a directory cannot be read and permission_action is RAISE.
        """
        return sorted(self.iter_file_paths())

    def iter_file_paths(self) -> Iterator[str]:
        """Yield the relative paths of all files in the tree in traversal order.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If a directory cannot be read and permission_action is RAISE.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        yield from self._walk(self.root_path, "")

    def _walk(self, path: Path, relative_path: str) -> Iterator[str]:
        try:
            children = sorted(os.listdir(path))
        except PermissionError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Access denied to {path}: {e}")
            if self.permission_action == PermissionAction.WARN:
                logger.warning("Skipping unreadable directory %s: %s", path, e)
            else:
                logger.debug("Skipping unreadable directory %s", path)
            return

        for child in children:
            child_path = path / child
            child_relative_path = f"{relative_path}/{child}" if relative_path else child
            is_dir = child_path.is_dir() and not child_path.is_symlink()

            if self._is_excluded(child_relative_path, is_dir):
                logger.debug("Skipping excluded path %s", child_relative_path)
                continue

            if is_dir:
                yield from self._walk(child_path, child_relative_path)
            else:
                yield child_relative_path

    def _is_excluded(self, relative_path: str, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False

        # Directory patterns like "build/" only match paths with a trailing slash
        return self.exclusion_rules.exclude(relative_path + "/" if is_dir else relative_path)
