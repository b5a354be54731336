"""Test configuration and fixtures for tree2excludes."""

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Return a factory creating files for the given relative paths below a fresh directory."""

    def make(paths, root_name="project"):
        root = tmp_path / root_name
        root.mkdir()
        for path in paths:
            file_path = root / path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(f"content of {path}\n")
        return root

    return make
