"""Output strategy base class defining the interface for formatting path excludes.

This module provides the abstract base class that defines how generated path excludes
are rendered for output. Concrete strategies render a complete document in three
phases so that the CLI can stream excludes one at a time.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from tree2excludes.path_exclude import PathExclude


class OutputStrategy(ABC):
    """Abstract base class for path exclude output formats.

    This class implements the Strategy pattern for rendering excludes in different formats
    (e.g., plain text, JSON). The output of a document is divided into three phases:

    1. Start - outputs the opening wrapper of the document
    2. Exclude - outputs one exclude, called once per exclude in sorted order
    3. End - outputs the closing wrapper of the document

    Example:
        >>> from tree2excludes.types import ExcludeReason
        >>> class CsvStrategy(OutputStrategy):
        ...     def format_start(self) -> str:
        ...         return "pattern,reason\\n"
        ...
        ...     def format_exclude(self, exclude: PathExclude, index: int) -> str:
        ...         return f"{exclude.pattern},{exclude.reason.value}\\n"
        ...
        ...     def format_end(self, count: int) -> str:
        ...         return ""
        >>> excludes = [PathExclude("docs/**", ExcludeReason.DOCUMENTATION)]
        >>> print("".join(CsvStrategy().render(excludes)), end="")
        pattern,reason
        docs/**,DOCUMENTATION_OF
    """

    @abstractmethod
    def format_start(self) -> str:
        """Format the opening wrapper of the document."""
        pass

    @abstractmethod
    def format_exclude(self, exclude: PathExclude, index: int) -> str:
        """Format a single path exclude.

        Args:
            exclude: The exclude to format.
            index: Zero-based position of the exclude in the document, for formats that
                need separators between entries.

        Returns:
            The formatted exclude string.
        """
        pass

    @abstractmethod
    def format_end(self, count: int) -> str:
        """Format the closing wrapper of the document.

        Args:
            count: The number of excludes that were formatted.
        """
        pass

    def render(self, excludes: Iterable[PathExclude]) -> Iterator[str]:
        """Yield the chunks of a complete document for the excludes, sorted by pattern and reason."""
        yield self.format_start()

        count = 0
        for count, exclude in enumerate(sorted(excludes), start=1):
            yield self.format_exclude(exclude, count - 1)

        yield self.format_end(count)
