from tree2excludes.path_exclude import PathExclude

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Renders one exclude per line as the pattern and the reason separated by a tab.

    Example:
        >>> from tree2excludes.types import ExcludeReason
        >>> TextOutputStrategy().format_exclude(PathExclude("tests/**", ExcludeReason.TEST), 0)
        'tests/**\\tTEST_OF\\n'
    """

    def format_start(self) -> str:
        return ""

    def format_exclude(self, exclude: PathExclude, index: int) -> str:
        return f"{exclude.pattern}\t{exclude.reason.value}\n"

    def format_end(self, count: int) -> str:
        return ""
