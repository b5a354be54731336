import textwrap

import yaml

from tree2excludes.output_strategies.yaml_strategy import OrtYamlOutputStrategy
from tree2excludes.path_exclude import PathExclude
from tree2excludes.types import ExcludeReason


def render(excludes):
    return "".join(OrtYamlOutputStrategy().render(excludes))


def test_render():
    excludes = [
        PathExclude("docs/**", ExcludeReason.DOCUMENTATION),
        PathExclude(".editorconfig", ExcludeReason.OTHER),
    ]

    assert yaml.safe_load(render(excludes)) == {
        "excludes": {
            "paths": [
                {
                    "pattern": ".editorconfig",
                    "reason": "OTHER",
                    "comment": "This is very likely not licensable source code.",
                },
                {
                    "pattern": "docs/**",
                    "reason": "DOCUMENTATION_OF",
                    "comment": "This is very likely documentation.",
                },
            ]
        }
    }


def test_keys_keep_their_order():
    output = render([PathExclude("tests/**", ExcludeReason.TEST)])
    assert output.index("pattern:") < output.index("reason:") < output.index("comment:")


def test_render_empty():
    output = render([])
    assert output == "excludes:\n  paths: []\n"
    assert yaml.safe_load(output) == {"excludes": {"paths": []}}


def test_patterns_starting_with_a_star_load_as_strings():
    """Such patterns would be read as YAML aliases if left unquoted."""
    excludes = [
        PathExclude("**/build.gradle", ExcludeReason.BUILD_TOOL),
        PathExclude("*.pdf", ExcludeReason.DOCUMENTATION),
    ]

    paths = yaml.safe_load(render(excludes))["excludes"]["paths"]

    assert [entry["pattern"] for entry in paths] == ["**/build.gradle", "*.pdf"]


def test_special_characters_survive():
    pattern = 'odd "name": #1\\file'
    paths = yaml.safe_load(render([PathExclude(pattern, ExcludeReason.OTHER)]))["excludes"]["paths"]
    assert paths[0]["pattern"] == pattern


def test_every_reason_has_a_comment():
    strategy = OrtYamlOutputStrategy()
    for reason in ExcludeReason:
        entry = yaml.safe_load(textwrap.dedent(strategy.format_exclude(PathExclude("x", reason), 1)))
        assert entry[0]["comment"]
