import json

import pytest

from tree2excludes.output_strategies.json_strategy import JSONOutputStrategy
from tree2excludes.path_exclude import PathExclude
from tree2excludes.types import ExcludeReason


@pytest.fixture
def json_strategy():
    """Fixture to provide a clean JSONOutputStrategy instance for each test."""
    return JSONOutputStrategy()


def test_format_exclude(json_strategy):
    exclude = PathExclude("docs/**", ExcludeReason.DOCUMENTATION)

    assert json_strategy.format_exclude(exclude, 0) == '  {"pattern": "docs/**", "reason": "DOCUMENTATION_OF"}'
    assert json_strategy.format_exclude(exclude, 1) == ',\n  {"pattern": "docs/**", "reason": "DOCUMENTATION_OF"}'


def test_format_exclude_escapes_special_characters(json_strategy):
    exclude = PathExclude('odd "name"\\file', ExcludeReason.OTHER)
    assert '"odd \\"name\\"\\\\file"' in json_strategy.format_exclude(exclude, 0)


def test_render_is_valid_sorted_json(json_strategy):
    excludes = {
        PathExclude("tests/**", ExcludeReason.TEST),
        PathExclude("**/build.gradle", ExcludeReason.BUILD_TOOL),
        PathExclude("docs/**", ExcludeReason.DOCUMENTATION),
    }

    document = json.loads("".join(json_strategy.render(excludes)))

    assert document == [
        {"pattern": "**/build.gradle", "reason": "BUILD_TOOL_OF"},
        {"pattern": "docs/**", "reason": "DOCUMENTATION_OF"},
        {"pattern": "tests/**", "reason": "TEST_OF"},
    ]


def test_render_empty(json_strategy):
    output = "".join(json_strategy.render([]))
    assert output == "[\n]\n"
    assert json.loads(output) == []
