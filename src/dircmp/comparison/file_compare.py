"""Byte-for-byte comparison of two regular files."""

import logging
from pathlib import Path

from dircmp.exceptions import ComparisonIOError
from dircmp.types import FileCompResult, PathType

logger = logging.getLogger(__name__)


def read_file_bytes(path: PathType) -> bytes:
    """Read the whole content of ``path``.

    Raises:
        ComparisonIOError: If the file cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ComparisonIOError(path, e) from e


def compare_two_files(left_path: PathType, right_path: PathType) -> FileCompResult:
    """Compare two regular files for exact byte equality.

    Both files are read fully into memory before comparing.

    Raises:
        ComparisonIOError: If either file cannot be read.
    """
    left_content = read_file_bytes(left_path)
    right_content = read_file_bytes(right_path)

    result = FileCompResult.EQUAL if left_content == right_content else FileCompResult.DIFFERENT
    logger.debug("Compared %s vs %s: %s", left_path, right_path, result.value)
    return result
