"""Path exclude generation for license compliance reviews.

This package inspects the list of files in a source tree and proposes glob-style
path excludes for content that is very likely build tooling, documentation or
tests rather than licensable source code.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("tree2excludes")
except PackageNotFoundError:
    __version__ = "unknown"
