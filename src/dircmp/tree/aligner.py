"""Alignment of two directory listings by relative path.

The aligner looks at one directory level at a time. Each child path is turned into
a path relative to its side's base (the comparison root), and children from the two
sides are paired when their relative paths are equal. Classification into files,
directories and symlinks is left to the caller.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from dircmp.filter_rules.base_rules import BaseFilterRules, should_exclude
from dircmp.types import FileType, PathType

from .file_lister import get_file_type, list_directory

logger = logging.getLogger(__name__)


class AlignmentKind(Enum):
    """Outcome of aligning one relative path across both sides."""

    BOTH = "both"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"


@dataclass(frozen=True)
class AlignedEntry:
    """One relative path and the child path(s) found for it on each side.

    Attributes:
        kind: Whether the path was found on both sides or only one.
        relative_path: Path relative to the side's base, with forward slashes.
        left: Full child path under the left directory, if present.
        right: Full child path under the right directory, if present.
    """

    kind: AlignmentKind
    relative_path: str
    left: Optional[Path] = None
    right: Optional[Path] = None

    @classmethod
    def both(cls, relative_path: str, left: Path, right: Path) -> "AlignedEntry":
        return cls(AlignmentKind.BOTH, relative_path, left, right)

    @classmethod
    def left_only(cls, relative_path: str, left: Path) -> "AlignedEntry":
        return cls(AlignmentKind.LEFT_ONLY, relative_path, left=left)

    @classmethod
    def right_only(cls, relative_path: str, right: Path) -> "AlignedEntry":
        return cls(AlignmentKind.RIGHT_ONLY, relative_path, right=right)


def relative_path_of(path: Path, base: PathType) -> str:
    """Strip ``base`` from ``path`` and return the remainder with forward slashes.

    Example:
        >>> relative_path_of(Path("/data/left/sub/a.txt"), "/data/left")
        'sub/a.txt'
    """
    return path.relative_to(base).as_posix()


def zip_dir_entries(
    left_dir: PathType,
    right_dir: PathType,
    left_base: PathType,
    right_base: PathType,
    filter_rules: Optional[BaseFilterRules] = None,
) -> List[AlignedEntry]:
    """Align the immediate children of two directories by relative path.

    Each side is filtered on its own before alignment, using the path relative to
    that side's base. Left children come first, in name order, each as BOTH or
    LEFT_ONLY. They are followed by the right children that have no counterpart,
    in name order, as RIGHT_ONLY. Matched pairs appear once.

    Args:
        left_dir: Directory on the left side whose children are aligned.
        right_dir: Directory on the right side whose children are aligned.
        left_base: Prefix removed from left children to get relative paths.
        right_base: Prefix removed from right children to get relative paths.
        filter_rules: Optional rules dropping relative paths before alignment.

    Returns:
        The aligned entries for this directory level.

    Raises:
        ComparisonIOError: If either directory cannot be listed.

    Example:
        >>> entries = zip_dir_entries("left", "right", "left", "right")  # doctest: +SKIP
        >>> [(e.kind.value, e.relative_path) for e in entries]  # doctest: +SKIP
        [('both', 'a.txt'), ('left_only', 'b.txt'), ('right_only', 'c.txt')]
    """
    left_children = _relative_children(left_dir, left_base, filter_rules)
    right_children = _relative_children(right_dir, right_base, filter_rules)

    results: List[AlignedEntry] = []
    for relative_path, left_child in left_children.items():
        right_child = right_children.get(relative_path)
        if right_child is not None:
            results.append(AlignedEntry.both(relative_path, left_child, right_child))
        else:
            results.append(AlignedEntry.left_only(relative_path, left_child))

    for relative_path, right_child in right_children.items():
        if relative_path not in left_children:
            results.append(AlignedEntry.right_only(relative_path, right_child))

    logger.debug("Aligned %s with %s: %d entries", left_dir, right_dir, len(results))
    return results


def _relative_children(
    directory: PathType, base: PathType, filter_rules: Optional[BaseFilterRules]
) -> Dict[str, Path]:
    """Map relative path to child path for every child kept by the filter."""
    children: Dict[str, Path] = {}
    for child in list_directory(directory):
        relative_path = relative_path_of(child, base)
        is_dir = filter_rules is not None and get_file_type(child) is FileType.DIRECTORY
        if should_exclude(relative_path, filter_rules, is_dir):
            logger.debug("Filtered out %s", relative_path)
            continue
        # First match wins; a well-formed listing has no duplicates
        children.setdefault(relative_path, child)
    return children
