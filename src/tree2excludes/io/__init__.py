"""Input helpers for reading relative path lists."""

from .path_list_reader import iter_path_list, normalize_path_line, read_path_list

__all__ = [
    "iter_path_list",
    "normalize_path_line",
    "read_path_list",
]
