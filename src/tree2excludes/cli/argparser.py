"""Command-line argument parsing for tree2excludes.

This module defines the command-line interface for tree2excludes,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from tree2excludes import __version__
from tree2excludes.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    This factory function creates an action class that will update the provided
    exclusion rules object as arguments are processed. This preserves the exact
    order of exclusion specifications as they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            # Also keep the raw values on the namespace
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with tree2excludes' options.
    """
    description = """
    tree2excludes: Propose path excludes for a license compliance review of a source tree.

    The tool looks at the names of all files and directories in a source tree and proposes
    glob patterns for content that is very likely build tooling, documentation or tests
    rather than licensable source code. Each pattern is tagged with the reason for the
    exclude. The proposals are heuristics and should be reviewed before they are used.

    Directory excludes (e.g. "docs/**") are proposed first. Files that are not inside an
    excluded directory are then matched by name (e.g. "**/build.gradle"), and the smallest
    set of patterns covering all matched files is chosen.
    """

    epilog = """
    Examples:
      # Propose excludes for a checked out project
      tree2excludes /path/to/project

      # Skip the VCS metadata and anything ignored by Git while walking
      tree2excludes -i ".git/" -e /path/to/project/.gitignore /path/to/project

      # Use the file list of a Git repository instead of walking the disk
      git ls-files | tree2excludes -p -

      # Write the excludes section of an .ort.yml file
      tree2excludes -f yaml -o excludes.yml /path/to/project

      # Only propose directory excludes, with debug logging
      tree2excludes -m directories -vv /path/to/project

      # Display version information and exit
      tree2excludes -V
    """

    parser = argparse.ArgumentParser(
        prog="tree2excludes",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"tree2excludes {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help="The source tree to walk. All generated patterns are relative to this directory.",
    )
    parser.add_argument(
        "-p",
        "--paths",
        metavar="FILE",
        help="Read relative file paths, one per line, from FILE instead of walking a directory. Use '-' for stdin.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help=(
            "Path to a file with gitignore-style patterns of paths to skip while walking the directory "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern of paths to skip while walking the directory, e.g. '.git/'. "
            "Can be specified multiple times, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle unreadable directories while walking (default: ignore).",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=["all", "directories", "files"],
        default="all",
        help="Propose directory and file excludes, or only one kind of them (default: all).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format. 'yaml' writes the excludes section of an .ort.yml file (default: text).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity on stderr (-v for info, -vv for debug).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.directory is None and args.paths is None:
        raise ValueError("Either a directory or -p/--paths must be specified")
    if args.directory is not None and args.paths is not None:
        raise ValueError("A directory and -p/--paths cannot be specified together")
    if args.paths is not None and (args.exclude or args.ignore):
        raise ValueError("-e/--exclude and -i/--ignore only apply when walking a directory")
