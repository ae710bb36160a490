"""Recursive comparison engine shared by the full and light comparators.

One call handles one directory level: the two directories are aligned by relative
path, matched files are compared byte for byte, matched directories are descended
into, and one-sided directories are flattened into their file leaves. Symlinks are
never followed and never reported. Every piece of context (bases, filter, options)
travels as an argument, so concurrent comparisons cannot interfere.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from dircmp.exceptions import InvalidRootError
from dircmp.tree.aligner import relative_path_of, zip_dir_entries
from dircmp.tree.file_lister import get_file_type, list_files
from dircmp.types import FileType, PathType

from .entry import ComparisonEntry
from .file_compare import compare_two_files
from .options import CompareOptions

logger = logging.getLogger(__name__)

EntryFactory = Callable[[str, Path], ComparisonEntry]


def validate_roots(left_root: PathType, right_root: PathType) -> Tuple[Path, Path]:
    """Check that both roots exist and are directories.

    Returns:
        The two roots as Path objects.

    Raises:
        InvalidRootError: If either root is missing or is not a directory.
    """
    roots = []
    for side, root in (("left", left_root), ("right", right_root)):
        path = Path(root)
        if not path.exists():
            logger.error("The %s path does not exist: %s", side, path)
            raise InvalidRootError(path, side, "does not exist")
        if not path.is_dir():
            logger.error("The %s path is not a directory: %s", side, path)
            raise InvalidRootError(path, side, "is not a directory")
        roots.append(path)
    return roots[0], roots[1]


def run_comparison(
    left_root: PathType, right_root: PathType, options: Optional[CompareOptions]
) -> List[ComparisonEntry]:
    """Validate the roots and compare the two trees under ``options``.

    Raises:
        InvalidRootError: If either root is missing or is not a directory.
        ComparisonIOError: If a directory or file cannot be read during traversal.
    """
    left, right = validate_roots(left_root, right_root)
    options = options if options is not None else CompareOptions()

    logger.info("Comparing %s vs %s", left, right)
    results = compare_dirs_inner(left, right, left, right, options)
    logger.info("Comparison of %s vs %s produced %d entries", left, right, len(results))
    return results


def compare_dirs_inner(
    left_dir: Path,
    right_dir: Path,
    left_base: Path,
    right_base: Path,
    options: CompareOptions,
) -> List[ComparisonEntry]:
    """Compare one directory level and everything below it."""
    logger.debug("Comparing directories %s vs %s", left_dir, right_dir)

    results: List[ComparisonEntry] = []
    for aligned in zip_dir_entries(left_dir, right_dir, left_base, right_base, options.filter_rules):
        left, right = aligned.left, aligned.right
        if left is not None and right is not None:
            results.extend(_compare_matched(aligned.relative_path, left, right, left_base, right_base, options))
        elif left is not None:
            if not options.ignore_left_only:
                results.extend(_expand_one_sided(left, left_base, ComparisonEntry.left_only, options))
        elif right is not None and not options.ignore_right_only:
            results.extend(_expand_one_sided(right, right_base, ComparisonEntry.right_only, options))
    return results


def _compare_matched(
    relative_path: str, left: Path, right: Path, left_base: Path, right_base: Path, options: CompareOptions
) -> List[ComparisonEntry]:
    left_type = get_file_type(left)
    right_type = get_file_type(right)

    if left_type is FileType.FILE and right_type is FileType.FILE:
        result = compare_two_files(left, right)
        entry = ComparisonEntry.matched(relative_path, left, right, result)
        if entry.is_difference or not options.ignore_equal:
            return [entry]
        return []

    if left_type is FileType.DIRECTORY and right_type is FileType.DIRECTORY:
        if not options.recursive:
            return []
        return compare_dirs_inner(left, right, left_base, right_base, options)

    if options.report_type_mismatch and {left_type, right_type} == {FileType.FILE, FileType.DIRECTORY}:
        return [ComparisonEntry.type_mismatch(relative_path, left, right)]

    logger.debug("Ignoring %s: %s vs %s", relative_path, left_type, right_type)
    return []


def _expand_one_sided(
    path: Path, base: Path, make_entry: EntryFactory, options: CompareOptions
) -> List[ComparisonEntry]:
    file_type = get_file_type(path)

    if file_type is FileType.FILE:
        return [make_entry(relative_path_of(path, base), path)]

    if file_type is FileType.DIRECTORY and options.recursive:
        return [make_entry(relative_path_of(leaf, base), leaf) for leaf in list_files(path)]

    logger.debug("Ignoring one-sided %s (%s)", path, file_type)
    return []
