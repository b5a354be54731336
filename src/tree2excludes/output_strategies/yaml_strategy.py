import textwrap
from typing import Any

import yaml

from tree2excludes.path_exclude import PathExclude
from tree2excludes.types import ExcludeReason

from .base_strategy import OutputStrategy

_COMMENTS = {
    ExcludeReason.BUILD_TOOL: "This is very likely build tooling.",
    ExcludeReason.DOCUMENTATION: "This is very likely documentation.",
    ExcludeReason.TEST: "This is very likely test code or test data.",
    ExcludeReason.OTHER: "This is very likely not licensable source code.",
}


def _dump_nested(data: Any) -> str:
    # Content of the "excludes" mapping, indented one level
    return textwrap.indent(yaml.safe_dump(data, sort_keys=False, default_flow_style=False), "  ")


class OrtYamlOutputStrategy(OutputStrategy):
    """Renders the ``excludes`` section of an ``.ort.yml`` repository configuration file.

    Every exclude is dumped as its own list item, so the document can be streamed.

    Example:
        >>> strategy = OrtYamlOutputStrategy()
        >>> print("".join(strategy.render([PathExclude("tests/**", ExcludeReason.TEST)])), end="")
        excludes:
          paths:
          - pattern: tests/**
            reason: TEST_OF
            comment: This is very likely test code or test data.
        >>> print("".join(strategy.render([])), end="")
        excludes:
          paths: []
    """

    def format_start(self) -> str:
        return "excludes:\n"

    def format_exclude(self, exclude: PathExclude, index: int) -> str:
        header = "  paths:\n" if index == 0 else ""
        entry = {
            "pattern": exclude.pattern,
            "reason": exclude.reason.value,
            "comment": _COMMENTS[exclude.reason],
        }
        return header + _dump_nested([entry])

    def format_end(self, count: int) -> str:
        return "" if count else _dump_nested({"paths": []})
