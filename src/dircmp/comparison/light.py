"""Light comparator: reports only the leaves that differ or are missing."""

import dataclasses
from typing import List, Optional

from dircmp.types import PathType

from .engine import run_comparison
from .entry import ComparisonEntry
from .options import CompareOptions


def compare_dirs(
    left_root: PathType, right_root: PathType, options: Optional[CompareOptions] = None
) -> List[ComparisonEntry]:
    """Compare two directory trees and report only what is not equal.

    Equal files and type mismatches are never reported, whatever ``options`` says.
    The filter, the one-sided ignore flags and ``recursive`` are honored.

    Raises:
        InvalidRootError: If either root is missing or is not a directory.
        ComparisonIOError: If a directory or file cannot be read during traversal.
    """
    options = options if options is not None else CompareOptions()
    light_options = dataclasses.replace(options, ignore_equal=True, report_type_mismatch=False)
    return run_comparison(left_root, right_root, light_options)
