"""Command-line argument parsing for foldertree.

Options are declared here; checks argparse cannot express live in validate_args.
"""

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence, Type, Union

from foldertree import __version__
from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.folder_tree.folder_scanner import DEFAULT_FILE_LIMIT, MAX_FILE_LIMIT, MIN_FILE_LIMIT


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Build an argparse action that feeds -e/--exclude and -i/--ignore into a rules object.

    Rules files and single patterns are applied in command-line order, so a later "!"
    pattern can re-include what an earlier one left out. The raw values are also
    collected on the namespace.

    Args:
        exclusion_rules: Rules object filled while the command line is parsed.
    """

    class FeedExclusionRules(argparse.Action):
        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if self.dest == "exclude":
                try:
                    exclusion_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:
                exclusion_rules.add_rule(str(values))

            seen = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, [*seen, values])

    return FeedExclusionRules


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with foldertree's options.
    """
    description = """
    foldertree: Show the structure of a folder as a size-limited tree.

    Hidden entries, node_modules and .git are always left out. Every folder lists at
    most FILE_LIMIT entries; a folder with more shows its first FILE_LIMIT - 1 entries
    and a "... (N more)" marker.

    Only the working directory, /tmp, /home, /Users and /var/tmp (or any drive on
    Windows) may be scanned.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      foldertree

      # At most 50 entries per folder, as Markdown
      foldertree -n 50 -f markdown ./project

      # JSON response body, written to a file
      foldertree -f json -o structure.json ./project

      # Leave out build output and logs
      foldertree -i "dist/" -i "*.log" ./project
      foldertree -e .gitignore ./project

      # Only the first two levels, with a summary on stderr
      foldertree -d 2 -s stderr ./project
    """

    parser = argparse.ArgumentParser(
        prog="foldertree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"foldertree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="The directory to scan (default: the current directory).",
    )
    parser.add_argument(
        "-n",
        "--file-limit",
        metavar="FILE_LIMIT",
        default=str(DEFAULT_FILE_LIMIT),
        help=(
            f"Maximum number of entries shown per folder (default: {DEFAULT_FILE_LIMIT}). "
            f"Values are clamped to {MIN_FILE_LIMIT}-{MAX_FILE_LIMIT}; non-numeric values use the default."
        ),
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "markdown", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style rules file of entries to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help="Gitignore-style pattern of entries to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        metavar="N",
        help="Only list folders down to N levels below the scanned directory.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print a summary of folder, file, marker and node counts. Valid destinations: stderr, stdout",
    )
    parser.add_argument(
        "-W",
        "--warn-unreadable",
        action="store_true",
        help="Print a warning to stderr for every folder that could not be read.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_depth is not None and args.max_depth < 1:
        raise ValueError("--max-depth must be at least 1")
