"""Command-line interface for foldertree.

This module provides the `foldertree` command, which authorizes a directory path,
scans it into a size-limited tree and prints the tree as text, Markdown or JSON.

Exit Codes:
    0: Successful completion
    1: Unexpected error during execution
    2: Command-line syntax error or invalid input
    3: Directory not found
    4: Path is not a directory
    126: Access to the path is not allowed
    141: Broken pipe (e.g. when piping to `head`)

Example:
    # Tree of a project with at most 30 entries per folder
    $ foldertree -n 30 ./project

    # Display version information
    $ foldertree --version
"""

import os
import sys
from collections.abc import Mapping
from typing import Dict, Iterable, List, Optional, TextIO

from foldertree.cli.argparser import create_parser, validate_args
from foldertree.exceptions import FolderTreeError
from foldertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from foldertree.folder_structure import scan_folder_structure
from foldertree.folder_tree.scan_result import ScanResult
from foldertree.folder_tree.tree_node import EntryNode
from foldertree.output_strategies.base_strategy import OutputStrategy
from foldertree.output_strategies.json_strategy import JSONOutputStrategy
from foldertree.output_strategies.markdown_strategy import MarkdownOutputStrategy
from foldertree.output_strategies.text_strategy import TextOutputStrategy

EXIT_BROKEN_PIPE = 141


def create_output_strategy(output_format: str) -> OutputStrategy:
    """Return the output strategy for a format name ("text", "markdown" or "json").

    Raises:
        ValueError: If the format is not supported.
    """
    if output_format == "text":
        return TextOutputStrategy()
    elif output_format == "markdown":
        return MarkdownOutputStrategy()
    elif output_format == "json":
        return JSONOutputStrategy()
    raise ValueError(f"Unsupported output format: {output_format}")


def count_nodes(result: ScanResult) -> Dict[str, int]:
    """Count folders, files, truncation markers and all nodes of a scan result."""
    counts = {"folders": 0, "files": 0, "truncated": 0, "nodes": result.count}
    for node in result.iter_nodes():
        if not isinstance(node, EntryNode):
            counts["truncated"] += 1
        elif node.is_folder:
            counts["folders"] += 1
        else:
            counts["files"] += 1
    return counts


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string."""
    return "\n".join(
        [
            f"Folders: {counts['folders']}",
            f"Files: {counts['files']}",
            f"Truncated folders: {counts['truncated']}",
            f"Nodes: {counts['nodes']}",
        ]
    )


def write_lines(lines: Iterable[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")
    stream.flush()


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the foldertree command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
    """
    try:
        # Populated by -e/-i while the arguments are parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args(argv)
        validate_args(args)

        result = scan_folder_structure(
            args.directory,
            args.file_limit,
            exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
            max_depth=args.max_depth,
        )

        if args.warn_unreadable:
            for failure in result.read_failures:
                print(f"Warning: Could not read folder '{failure.path or '.'}': {failure.message}", file=sys.stderr)

        lines = create_output_strategy(args.format).render(result)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                write_lines(lines, f)
        else:
            write_lines(lines, sys.stdout)

        if args.summary:
            summary = format_counts(count_nodes(result))
            if args.summary == "stdout":
                sys.stdout.write("\n" + summary + "\n")
                sys.stdout.flush()
            else:
                print(summary, file=sys.stderr)

    except FolderTreeError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(e.category.exit_code)
    except ValueError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(2)
    except BrokenPipeError:
        # Keep the interpreter from complaining about stdout at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(EXIT_BROKEN_PIPE)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
