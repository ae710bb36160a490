"""Command-line argument parsing for dircmp.

This module defines the command-line interface for dircmp, handling argument
parsing, validation and the translation of arguments into CompareOptions.
"""

import argparse
from pathlib import Path
from re import Pattern
from typing import Any, List, Optional, Sequence, Type, Union

from dircmp import __version__
from dircmp.comparison.options import CompareOptions
from dircmp.exceptions import FilterPatternError
from dircmp.filter_rules.base_rules import BaseFilterRules
from dircmp.filter_rules.composite_rules import CompositeFilterRules
from dircmp.filter_rules.git_rules import GitIgnoreExclusionRules
from dircmp.filter_rules.regex_rules import RegexExclusionRules, RegexInclusionRules, compile_pattern


def regex_argument(value: str) -> Pattern[str]:
    """Argparse type converting a pattern string into a compiled regex."""
    try:
        return compile_pattern(value)
    except FilterPatternError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_ignore_action(git_rules: GitIgnoreExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds gitignore-style rules into ``git_rules``.

    Rules from -e/--exclude-from files and -i/--ignore patterns are added in the
    order they appear on the command line, so negations keep their meaning.

    Args:
        git_rules: The rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class IgnoreRulesAction(argparse.Action):
        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude-from"):
                try:
                    git_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:
                git_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return IgnoreRulesAction


def create_parser(git_rules: GitIgnoreExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        git_rules: The gitignore-style rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dircmp's options.
    """
    description = """
    dircmp: compare two directory trees.

    Every relative path present under either root is reported as equal, different,
    left only or right only. Matched files are compared byte for byte; one-sided
    directories are listed as the files they contain. Symbolic links are neither
    followed nor reported.
    """

    epilog = """
    Examples:
      # Compare two trees
      dircmp old/ new/

      # Only show what changed
      dircmp -E old/ new/
      dircmp --light old/ new/

      # Skip paths matching a regular expression (searched anywhere in the relative path)
      dircmp -x '\\.git' -x '__pycache__' old/ new/

      # Keep only paths matching every --include pattern
      dircmp -n '\\.py$' old/ new/

      # gitignore-style exclusions
      dircmp -e .gitignore -i '*.log' old/ new/

      # JSON lines or a tree view, with a summary on stderr
      dircmp -f json -o report.jsonl -s stderr old/ new/
      dircmp -f tree old/ new/

    Exit status:
      0 trees are identical, 1 differences found, 2 usage error or invalid root,
      3 I/O error during comparison, 130 interrupted, 141 broken pipe.
    """

    parser = argparse.ArgumentParser(
        prog="dircmp",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dircmp {__version__}", help="Show the version and exit"
    )

    parser.add_argument("left", type=Path, help="Root of the left directory tree.")
    parser.add_argument("right", type=Path, help="Root of the right directory tree.")

    parser.add_argument(
        "-l",
        "--light",
        action="store_true",
        help="Report only entries that differ or are missing on one side.",
    )
    parser.add_argument(
        "-E",
        "--hide-equal",
        action="store_true",
        help="Do not report matched files with identical content.",
    )
    parser.add_argument(
        "--hide-left-only",
        action="store_true",
        help="Do not report files present only in the left tree.",
    )
    parser.add_argument(
        "--hide-right-only",
        action="store_true",
        help="Do not report files present only in the right tree.",
    )
    parser.add_argument(
        "-N",
        "--no-recursive",
        action="store_true",
        help="Compare only the immediate children of the two roots.",
    )
    parser.add_argument(
        "--type-mismatch",
        action="store_true",
        help="Report paths that are a file on one side and a directory on the other.",
    )

    parser.add_argument(
        "-x",
        "--exclude",
        type=regex_argument,
        metavar="REGEX",
        action="append",
        default=[],
        help="Skip relative paths matched by this regular expression (can be specified multiple times).",
    )
    parser.add_argument(
        "-n",
        "--include",
        type=regex_argument,
        metavar="REGEX",
        action="append",
        default=[],
        help=(
            "Keep only relative paths matched by this regular expression. When given multiple "
            "times, a path must match every pattern."
        ),
    )

    IgnoreAction = create_ignore_action(git_rules)
    parser.add_argument(
        "-e",
        "--exclude-from",
        metavar="FILE",
        dest="ignore",
        action=IgnoreAction,
        help="Path to a .gitignore-style file of exclusion patterns (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        dest="ignore",
        action=IgnoreAction,
        help=(
            "Individual gitignore-style pattern to exclude (can be specified multiple times). Patterns "
            "are processed in the order they appear, mixed with -e/--exclude-from files."
        ),
    )

    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "tree"],
        default="text",
        help="Output format (default: text).",
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
        choices=["stderr", "stdout", "file"],
        help="Print per-status counts. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output on stderr (-v for info, -vv for debug).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse handles.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")


def build_filter_rules(
    args: argparse.Namespace, git_rules: Optional[GitIgnoreExclusionRules] = None
) -> Optional[BaseFilterRules]:
    """Combine the regex and gitignore-style filters requested on the command line.

    Returns:
        None when no filter was requested, the single rule set when only one kind
        was requested, otherwise a composite excluding what any of them excludes.
    """
    rules: List[BaseFilterRules] = []
    if args.exclude:
        rules.append(RegexExclusionRules(args.exclude))
    if args.include:
        rules.append(RegexInclusionRules(args.include))
    if git_rules is not None and git_rules.has_rules():
        rules.append(git_rules)

    if not rules:
        return None
    if len(rules) == 1:
        return rules[0]
    return CompositeFilterRules(rules)


def options_from_args(
    args: argparse.Namespace, git_rules: Optional[GitIgnoreExclusionRules] = None
) -> CompareOptions:
    """Translate parsed arguments into CompareOptions."""
    return CompareOptions(
        ignore_equal=args.hide_equal,
        ignore_left_only=args.hide_left_only,
        ignore_right_only=args.hide_right_only,
        filter_rules=build_filter_rules(args, git_rules),
        recursive=not args.no_recursive,
        report_type_mismatch=args.type_mismatch,
    )
