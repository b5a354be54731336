import io

import pytest

from tree2excludes.io.path_list_reader import iter_path_list, normalize_path_line, read_path_list


@pytest.mark.parametrize(
    "line,expected",
    [
        ("src/main.c\n", "src/main.c"),
        ("  docs/index.md  ", "docs/index.md"),
        ("./build.gradle", "build.gradle"),
        ("././a/b", "a/b"),
        ("src\\lib\\util.c", "src/lib/util.c"),
        (".\\src\\main.c", "src/main.c"),
        ("", ""),
        ("   \n", ""),
        ("# comment", ""),
        ("  # indented comment", ""),
        # Invalid paths are passed through for the generator to reject
        ("/abs/path", "/abs/path"),
        ("../outside", "../outside"),
    ],
)
def test_normalize_path_line(line, expected):
    assert normalize_path_line(line) == expected


def test_iter_path_list_skips_blank_lines_and_comments():
    lines = ["# files tracked by git\n", "README.md\n", "\n", "src/main.c\n"]
    assert list(iter_path_list(lines)) == ["README.md", "src/main.c"]


def test_read_path_list():
    content = "build.gradle\r\napp/build.gradle\r\n\r\n./lib/build.gradle\r\n"
    assert read_path_list(io.StringIO(content)) == ["build.gradle", "app/build.gradle", "lib/build.gradle"]


def test_read_path_list_empty():
    assert read_path_list(io.StringIO("")) == []
