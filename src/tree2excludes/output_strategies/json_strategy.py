import json

from tree2excludes.path_exclude import PathExclude

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Renders the excludes as a JSON array of objects with ``pattern`` and ``reason`` keys.

    Each exclude is written on its own line so the output stays readable and diffable.

    Example:
        >>> from tree2excludes.types import ExcludeReason
        >>> strategy = JSONOutputStrategy()
        >>> print("".join(strategy.render([PathExclude("docs/**", ExcludeReason.DOCUMENTATION)])), end="")
        [
          {"pattern": "docs/**", "reason": "DOCUMENTATION_OF"}
        ]
    """

    def format_start(self) -> str:
        return "[\n"

    def format_exclude(self, exclude: PathExclude, index: int) -> str:
        separator = ",\n" if index > 0 else ""
        entry = json.dumps({"pattern": exclude.pattern, "reason": exclude.reason.value})
        return f"{separator}  {entry}"

    def format_end(self, count: int) -> str:
        return "\n]\n" if count else "]\n"
