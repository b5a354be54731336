"""Tests for the greedy set cover selection."""

from tree2excludes.generator.set_cover import greedy_set_cover
from tree2excludes.path_exclude import PathExclude
from tree2excludes.types import ExcludeReason


def test_overlapping_candidate_is_dropped():
    candidates = {"a": {"f1", "f2", "f3"}, "b": {"f2", "f3"}}
    assert greedy_set_cover(candidates) == ["a"]


def test_empty_input():
    assert greedy_set_cover({}) == []


def test_candidates_without_elements():
    assert greedy_set_cover({"a": set(), "b": frozenset()}) == []


def test_disjoint_candidates_are_all_selected():
    assert greedy_set_cover({"b": {1}, "a": {2}, "c": {3, 4}}) == ["c", "a", "b"]


def test_ties_are_broken_by_candidate_order():
    assert greedy_set_cover({"b": {1, 2}, "a": {1, 2}}) == ["a"]


def test_custom_tie_breaker():
    assert greedy_set_cover({1: {"x"}, 2: {"x"}}, tie_breaker=lambda candidate: -candidate) == [2]


def test_selection_does_not_depend_on_mapping_order():
    candidates = {"big": {1, 2, 3, 4}, "left": {1, 2, 5}, "right": {3, 4, 6}, "tiny": {6}}
    reversed_candidates = dict(reversed(list(candidates.items())))

    assert greedy_set_cover(candidates) == greedy_set_cover(reversed_candidates)


def test_greedy_choice_is_not_necessarily_minimal():
    """The largest set is taken first even though the two others alone would cover everything."""
    candidates = {"big": {1, 2, 3, 4}, "left": {1, 2, 5}, "right": {3, 4, 6}}
    assert greedy_set_cover(candidates) == ["big", "left", "right"]


def test_gain_counts_only_uncovered_elements():
    candidates = {"a": {1, 2, 3, 4}, "b": {1, 2, 3, 5}, "c": {5, 6}}
    # After "a", "b" adds only 5 while "c" adds 5 and 6
    assert greedy_set_cover(candidates) == ["a", "c"]


def test_result_covers_all_elements():
    candidates = {
        "a": {1, 2},
        "b": {2, 3, 4},
        "c": {4, 5},
        "d": {6},
        "e": {1, 6},
    }
    result = greedy_set_cover(candidates)

    covered = set().union(*(candidates[candidate] for candidate in result))
    assert covered == {1, 2, 3, 4, 5, 6}
    assert len(result) == len(set(result))


def test_path_excludes_tie_on_pattern_then_reason():
    first = PathExclude("CHANGELOG.md", ExcludeReason.BUILD_TOOL)
    second = PathExclude("gradlew.bat", ExcludeReason.BUILD_TOOL)
    same_pattern = PathExclude("CHANGELOG.md", ExcludeReason.OTHER)

    candidates = {
        second: frozenset({"gradlew.bat"}),
        same_pattern: frozenset({"CHANGELOG.md"}),
        first: frozenset({"CHANGELOG.md"}),
    }

    assert greedy_set_cover(candidates) == [first, second]
