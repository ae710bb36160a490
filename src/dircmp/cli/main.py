"""Command-line interface for dircmp.

This module provides the command-line entry point, which compares two directory
trees and writes the classified entries in the requested format. It handles
argument parsing, logging setup, output redirection and signal management for
graceful interruption handling.

Exit Codes:
    0: The trees are identical (no entry other than equal files)
    1: Differences were found
    2: Command-line syntax error or invalid root directory
    3: I/O error while traversing the trees
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Compare two trees and list everything
    $ dircmp old/ new/

    # Only the differences, as a tree
    $ dircmp --light -f tree old/ new/
"""

import logging
import sys
from collections.abc import Mapping
from typing import Optional, Sequence

from dircmp.cli.argparser import create_parser, options_from_args, validate_args
from dircmp.cli.logging_config import configure_logging
from dircmp.cli.safe_writer import SafeWriter
from dircmp.cli.signal_handler import setup_signal_handling, signal_handler
from dircmp.dircmp import DirComparison
from dircmp.exceptions import ComparisonIOError, InvalidRootError
from dircmp.filter_rules.git_rules import GitIgnoreExclusionRules
from dircmp.output_strategies.base_strategy import OutputStrategy
from dircmp.output_strategies.json_strategy import JSONOutputStrategy
from dircmp.output_strategies.text_strategy import TextOutputStrategy
from dircmp.output_strategies.tree_strategy import TreeOutputStrategy
from dircmp.types import ComparisonPolicy

logger = logging.getLogger(__name__)

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_USAGE = 2
EXIT_IO_ERROR = 3


def format_counts(counts: Mapping[str, int]) -> str:
    """Format per-status counts into a human-readable string.

    Example:
        >>> print(format_counts({"equal": 3, "different": 1, "left_only": 0, "right_only": 2, "type_mismatch": 0}))
        Equal: 3
        Different: 1
        Left only: 0
        Right only: 2
    """
    result = [
        f"Equal: {counts['equal']}",
        f"Different: {counts['different']}",
        f"Left only: {counts['left_only']}",
        f"Right only: {counts['right_only']}",
    ]
    if counts.get("type_mismatch"):
        result.append(f"Type mismatch: {counts['type_mismatch']}")
    return "\n".join(result)


def create_strategy(output_format: str) -> OutputStrategy:
    """Return the output strategy for ``output_format``.

    Raises:
        ValueError: If the format is unknown.
    """
    strategies = {
        "text": TextOutputStrategy,
        "json": JSONOutputStrategy,
        "tree": TreeOutputStrategy,
    }
    try:
        return strategies[output_format]()
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dircmp command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes are listed in the module documentation.
    """
    setup_signal_handling()

    git_rules = GitIgnoreExclusionRules()
    parser = create_parser(git_rules)
    # argparse exits with 2 on argument errors and 0 for --version
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    logger.debug("Parsed arguments: %s", args)

    try:
        validate_args(args)
        comparison = DirComparison(
            args.left,
            args.right,
            options=options_from_args(args, git_rules),
            policy=ComparisonPolicy.LIGHT if args.light else ComparisonPolicy.FULL,
        )
        strategy = create_strategy(args.format)
    except (InvalidRootError, ValueError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_USAGE)

    try:
        # Compare before opening the output so a failed run leaves no partial file
        entries = comparison.entries

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write_all(strategy.render(comparison.left_root, comparison.right_root, entries))

                if args.summary:
                    count_output_str = format_counts(comparison.counts)
                    if args.summary in ("stdout", "file"):
                        safe_writer.write("\n" + count_output_str + "\n")
                    else:
                        print(count_output_str, file=sys.stderr)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except ComparisonIOError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_IO_ERROR)
    except OSError as e:
        # Failures opening or writing the output file
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_IO_ERROR)

    signal_exit = signal_handler.exit_code()
    if signal_exit is not None:
        sys.exit(signal_exit)

    sys.exit(EXIT_IDENTICAL if comparison.is_identical else EXIT_DIFFERENT)


if __name__ == "__main__":
    main()
