from tree2excludes.output_strategies.text_strategy import TextOutputStrategy
from tree2excludes.path_exclude import PathExclude
from tree2excludes.types import ExcludeReason


def test_render():
    excludes = [
        PathExclude("tests/**", ExcludeReason.TEST),
        PathExclude("CMakeLists.txt", ExcludeReason.BUILD_TOOL),
    ]

    output = "".join(TextOutputStrategy().render(excludes))

    assert output == "CMakeLists.txt\tBUILD_TOOL_OF\ntests/**\tTEST_OF\n"


def test_render_empty():
    assert "".join(TextOutputStrategy().render([])) == ""
