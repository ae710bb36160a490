"""Output records produced by the comparators."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dircmp.types import EntryStatus, FileCompResult


@dataclass(frozen=True)
class ComparisonEntry:
    """Classification of one relative path across both trees.

    Matched records carry both full paths; one-sided records carry only the path on
    their own side.

    Attributes:
        status: How the path relates across the two trees.
        relative_path: Path relative to the comparison roots, with forward slashes.
        left: Full path under the left root, if the path exists there.
        right: Full path under the right root, if the path exists there.

    Example:
        >>> entry = ComparisonEntry.left_only("d/x.txt", Path("/l/d/x.txt"))
        >>> entry.status
        <EntryStatus.LEFT_ONLY: 'left_only'>
        >>> entry.file_result is None
        True
    """

    status: EntryStatus
    relative_path: str
    left: Optional[Path] = None
    right: Optional[Path] = None

    @classmethod
    def matched(cls, relative_path: str, left: Path, right: Path, result: FileCompResult) -> "ComparisonEntry":
        return cls(EntryStatus.from_file_result(result), relative_path, left, right)

    @classmethod
    def left_only(cls, relative_path: str, left: Path) -> "ComparisonEntry":
        return cls(EntryStatus.LEFT_ONLY, relative_path, left=left)

    @classmethod
    def right_only(cls, relative_path: str, right: Path) -> "ComparisonEntry":
        return cls(EntryStatus.RIGHT_ONLY, relative_path, right=right)

    @classmethod
    def type_mismatch(cls, relative_path: str, left: Path, right: Path) -> "ComparisonEntry":
        return cls(EntryStatus.TYPE_MISMATCH, relative_path, left, right)

    @property
    def file_result(self) -> Optional[FileCompResult]:
        """The byte comparison result for matched files, else None."""
        if self.status is EntryStatus.EQUAL:
            return FileCompResult.EQUAL
        if self.status is EntryStatus.DIFFERENT:
            return FileCompResult.DIFFERENT
        return None

    @property
    def is_difference(self) -> bool:
        """True for every status except EQUAL."""
        return self.status is not EntryStatus.EQUAL

    def __str__(self) -> str:
        if self.status is EntryStatus.LEFT_ONLY:
            return f"LeftOnly({self.left})"
        if self.status is EntryStatus.RIGHT_ONLY:
            return f"RightOnly({self.right})"
        if self.status is EntryStatus.TYPE_MISMATCH:
            return f"TypeMismatch({self.left}, {self.right})"
        return f"Both({self.left}, {self.right}, {self.status.value.capitalize()})"
