"""Generators inferring path excludes from the file paths of a source tree."""

from .directory_excludes import generate_directory_excludes
from .file_excludes import create_exclude_pattern, generate_file_excludes
from .path_exclude_generator import generate_path_excludes, validate_relative_path
from .set_cover import greedy_set_cover

__all__ = [
    "create_exclude_pattern",
    "generate_directory_excludes",
    "generate_file_excludes",
    "generate_path_excludes",
    "greedy_set_cover",
    "validate_relative_path",
]
