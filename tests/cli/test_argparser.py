"""Unit tests for the argument parser module in tree2excludes CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tree2excludes.cli.argparser import create_exclusion_action, create_parser, validate_args
from tree2excludes.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock exclusion rules object."""
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


def test_defaults(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(["/some/project"])

    assert args.directory == Path("/some/project")
    assert args.paths is None
    assert args.mode == "all"
    assert args.format == "text"
    assert args.permission_action == "ignore"
    assert args.output is None
    assert args.verbose == 0
    assert args.exclude is None
    assert args.ignore is None


def test_all_options(mock_exclusion_rules):
    parser = create_parser(mock_exclusion_rules)
    args = parser.parse_args(
        ["-p", "-", "-m", "files", "-f", "yaml", "-P", "fail", "-o", "out.yml", "-vv"],
    )

    assert args.directory is None
    assert args.paths == "-"
    assert args.mode == "files"
    assert args.format == "yaml"
    assert args.permission_action == "fail"
    assert args.output == Path("out.yml")
    assert args.verbose == 2


def test_exclusion_options_update_rules_in_order(mock_exclusion_rules):
    parser = create_parser(mock_exclusion_rules)
    args = parser.parse_args(["-i", ".git/", "-e", ".gitignore", "-i", "*.log", "."])

    assert mock_exclusion_rules.add_rule.call_args_list[0].args == (".git/",)
    assert mock_exclusion_rules.add_rule.call_args_list[1].args == ("*.log",)
    mock_exclusion_rules.load_rules.assert_called_once_with(Path(".gitignore"))
    assert args.ignore == [".git/", "*.log"]
    assert args.exclude == [Path(".gitignore")]


def test_exclusion_action_with_real_rules():
    rules = GitIgnoreExclusionRules()
    create_parser(rules).parse_args(["-i", "vendor/", "."])

    assert rules.exclude("vendor/")
    assert not rules.exclude("src/")


def test_create_exclusion_action():
    mock_rules = MagicMock()
    action_class = create_exclusion_action(mock_rules)

    assert issubclass(action_class, argparse.Action)


@pytest.mark.parametrize("argv", [["-m", "everything", "."], ["-f", "xml", "."], ["-P", "maybe", "."]])
def test_invalid_choices(mock_exclusion_rules, argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser(mock_exclusion_rules).parse_args(argv)
    assert exc_info.value.code == 2


def test_version(mock_exclusion_rules, capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser(mock_exclusion_rules).parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("tree2excludes ")


def test_validate_args_accepts_directory_or_paths(mock_exclusion_rules):
    parser = create_parser(mock_exclusion_rules)

    validate_args(parser.parse_args(["."]))
    validate_args(parser.parse_args(["-p", "paths.txt"]))


@pytest.mark.parametrize(
    "argv,message",
    [
        ([], "Either a directory or -p/--paths must be specified"),
        (["-p", "paths.txt", "."], "cannot be specified together"),
        (["-p", "paths.txt", "-i", ".git/"], "only apply when walking a directory"),
    ],
)
def test_validate_args_errors(mock_exclusion_rules, argv, message):
    args = create_parser(mock_exclusion_rules).parse_args(argv)

    with pytest.raises(ValueError, match=message):
        validate_args(args)
