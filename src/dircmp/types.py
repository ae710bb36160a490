from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of file types for classifying entries during comparison.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link (never followed, never reported)
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class FileCompResult(Enum):
    """Result of a full byte-content comparison of two regular files."""

    EQUAL = "equal"
    DIFFERENT = "different"


class EntryStatus(Enum):
    """Classification of one relative path across both trees.

    Attributes:
        EQUAL: Present on both sides as regular files with identical content.
        DIFFERENT: Present on both sides as regular files with differing content.
        LEFT_ONLY: Present only under the left root.
        RIGHT_ONLY: Present only under the right root.
        TYPE_MISMATCH: Present on both sides, but a file on one side and a directory
            on the other. Only reported when explicitly requested.
    """

    EQUAL = "equal"
    DIFFERENT = "different"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"
    TYPE_MISMATCH = "type_mismatch"

    @classmethod
    def from_file_result(cls, result: FileCompResult) -> "EntryStatus":
        return cls.EQUAL if result is FileCompResult.EQUAL else cls.DIFFERENT


class ComparisonPolicy(Enum):
    """Which comparator variant to run.

    Attributes:
        FULL: Report matched files (equal or different) and one-sided files.
        LIGHT: Report only the leaves that differ or are missing.
    """

    FULL = "full"
    LIGHT = "light"
