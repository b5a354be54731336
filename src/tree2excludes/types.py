from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Forward-slash separated path relative to the root of a source tree
RelativePath = str


class ExcludeReason(str, Enum):
    """Enumeration of reasons why a path is excluded.

    The values are the reason identifiers used by path excludes in ``.ort.yml``
    repository configuration files, so generated excludes can be pasted into such
    a file unchanged.

    Attributes:
        BUILD_TOOL: The path contains build tooling or build configuration.
        DOCUMENTATION: The path contains documentation or examples.
        TEST: The path contains tests, test fixtures or benchmarks.
        OTHER: Any other reason.
    """

    BUILD_TOOL = "BUILD_TOOL_OF"
    DOCUMENTATION = "DOCUMENTATION_OF"
    TEST = "TEST_OF"
    OTHER = "OTHER"
