"""Reading of relative file path lists produced by other tools."""

from typing import Iterable, Iterator, List, TextIO


def normalize_path_line(line: str) -> str:
    """Normalize a single line of a path list to a forward-slash separated relative path.

    Surrounding whitespace is stripped, backslashes become forward slashes and a leading
    ``./`` is dropped. Blank lines and ``#`` comments normalize to an empty string.

    Example:
        >>> normalize_path_line("  .\\\\docs\\\\index.md\\n")
        'docs/index.md'
        >>> normalize_path_line("# generated by find")
        ''
    """
    path = line.strip()
    if path.startswith("#"):
        return ""

    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]

    return path


def iter_path_list(lines: Iterable[str]) -> Iterator[str]:
    """Yield the normalized, non-empty paths of a path list."""
    for line in lines:
        path = normalize_path_line(line)
        if path:
            yield path


def read_path_list(file_obj: TextIO) -> List[str]:
    """Read all paths from an opened text file with one path per line.

    Args:
        file_obj: An opened text file object, e.g. ``sys.stdin`` or the output of ``git ls-files``.

    Returns:
        The normalized paths in file order. Validation against the relative path rules is
        left to the generator.

    Example:
        >>> import io
        >>> read_path_list(io.StringIO("src/main.c\\n\\n./docs/a.md\\n"))
        ['src/main.c', 'docs/a.md']
    """
    return list(iter_path_list(file_obj))
