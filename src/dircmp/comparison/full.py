"""Full comparator: reports matched files together with one-sided files.

Matched regular files are reported as EQUAL or DIFFERENT (EQUAL records can be
suppressed with ``ignore_equal``), one-sided files as LEFT_ONLY or RIGHT_ONLY.
"""

from typing import List, Optional

from dircmp.types import PathType

from .engine import run_comparison
from .entry import ComparisonEntry
from .options import CompareOptions


def compare_dirs(
    left_root: PathType, right_root: PathType, options: Optional[CompareOptions] = None
) -> List[ComparisonEntry]:
    """Compare two directory trees and report every aligned file.

    Args:
        left_root: Root of the left tree.
        right_root: Root of the right tree.
        options: Comparison options. Defaults to reporting everything.

    Returns:
        The classified entries, left-listing order first at every level.

    Raises:
        InvalidRootError: If either root is missing or is not a directory.
        ComparisonIOError: If a directory or file cannot be read during traversal.

    Example:
        >>> for entry in compare_dirs("left", "right"):  # doctest: +SKIP
        ...     print(entry)
        Both(left/a.txt, right/a.txt, Equal)
        LeftOnly(left/b.txt)
        RightOnly(right/c.txt)
    """
    return run_comparison(left_root, right_root, options)
