"""Command-line interface for tree2excludes.

This module provides the command-line interface for tree2excludes. It collects the
relative file paths of a source tree, either by walking a directory or by reading a
path list, runs the exclude generator and writes the proposed excludes in the
requested format.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (e.g. invalid paths or unreadable input)
    2: Command-line syntax error
    126: Permission denied while walking with -P fail

Example:
    # Propose excludes for a directory
    $ tree2excludes /path/to/project

    # Propose excludes for the files tracked by Git
    $ git ls-files | tree2excludes -p -

    # Display version information
    $ tree2excludes --version
"""

import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, List, Set, Type

from tree2excludes.cli.argparser import create_parser, validate_args
from tree2excludes.exclusion_rules.base_rules import BaseExclusionRules
from tree2excludes.exclusion_rules.git_rules import GitIgnoreExclusionRules
from tree2excludes.file_system_tree.permission_action import PermissionAction
from tree2excludes.file_system_tree.source_tree_walker import SourceTreeWalker
from tree2excludes.generator import (
    generate_directory_excludes,
    generate_file_excludes,
    generate_path_excludes,
    validate_relative_path,
)
from tree2excludes.io.path_list_reader import read_path_list
from tree2excludes.output_strategies import (
    JSONOutputStrategy,
    OrtYamlOutputStrategy,
    OutputStrategy,
    TextOutputStrategy,
)
from tree2excludes.path_exclude import PathExclude

logger = logging.getLogger(__name__)

OUTPUT_STRATEGIES: Dict[str, Type[OutputStrategy]] = {
    "text": TextOutputStrategy,
    "json": JSONOutputStrategy,
    "yaml": OrtYamlOutputStrategy,
}

PERMISSION_ACTIONS = {
    "ignore": PermissionAction.IGNORE,
    "warn": PermissionAction.WARN,
    "fail": PermissionAction.RAISE,
}


def _generate_single_pass(
    generate: Callable[[Iterable[str]], Set[PathExclude]],
) -> Callable[[List[str]], Set[PathExclude]]:
    """Wrap a single generator pass with the input validation of the full generator."""

    def run(paths: List[str]) -> Set[PathExclude]:
        for path in paths:
            validate_relative_path(path)
        return generate(paths)

    return run


GENERATORS: Dict[str, Callable[[List[str]], Set[PathExclude]]] = {
    "all": generate_path_excludes,
    "directories": _generate_single_pass(generate_directory_excludes),
    "files": _generate_single_pass(generate_file_excludes),
}


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the number of -v flags."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s", stream=sys.stderr)


def collect_paths(args: argparse.Namespace, exclusion_rules: BaseExclusionRules) -> List[str]:
    """Return the relative file paths to generate excludes for, as selected on the command line."""
    if args.paths is not None:
        if args.paths == "-":
            return read_path_list(sys.stdin)

        with open(args.paths, "r", encoding="utf-8") as f:
            return read_path_list(f)

    walker = SourceTreeWalker(
        args.directory,
        exclusion_rules=exclusion_rules,
        permission_action=PERMISSION_ACTIONS[args.permission_action],
    )
    return walker.get_file_paths()


def write_output(args: argparse.Namespace, excludes: Iterable[PathExclude]) -> None:
    """Render the excludes in the requested format to the output file or stdout."""
    strategy = OUTPUT_STRATEGIES[args.format]()

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            for chunk in strategy.render(excludes):
                f.write(chunk)
    else:
        for chunk in strategy.render(excludes):
            sys.stdout.write(chunk)
        sys.stdout.flush()


def main() -> None:
    """Main entry point for the tree2excludes command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied while walking with -P fail
    """
    # Create the exclusion rules object that will be populated during parsing
    exclusion_rules = GitIgnoreExclusionRules()

    try:
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
    except FileNotFoundError as e:
        # Raised by -e/--exclude while parsing
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(2)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose)

    try:
        paths = collect_paths(args, exclusion_rules)
        logger.info("Collected %d path(s)", len(paths))

        excludes = GENERATORS[args.mode](paths)
        write_output(args, excludes)

    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
