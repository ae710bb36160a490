from pathlib import Path
from typing import Optional

from dircmp.types import PathType


class DirCmpError(Exception):
    """Base class for all errors raised by dircmp."""

    pass


class InvalidRootError(DirCmpError):
    """
    Exception raised when a comparison root is missing or is not a directory.

    Both roots are validated eagerly, before any traversal starts, so this error
    never leaves a comparison half done.

    Attributes:
        path (Path): The offending root path.
        side (str): Which root was invalid, either "left" or "right".
        reason (str): Short description of what is wrong with the path.

    Example:
        >>> error = InvalidRootError("/no/such/dir", "left", "does not exist")
        >>> str(error)
        'The left path does not exist: /no/such/dir'
        >>> error.side
        'left'
    """

    def __init__(self, path: PathType, side: str, reason: str) -> None:
        self.path = Path(path)
        self.side = side
        self.reason = reason
        super().__init__(f"The {side} path {reason}: {path}")


class ComparisonIOError(DirCmpError):
    """
    Exception raised when listing a directory or reading a file fails mid-comparison.

    The original ``OSError`` is kept both as ``original`` and as the exception's
    ``__cause__``. The comparison is aborted; no partial result is returned.

    Attributes:
        path (Path): The path whose access failed.
        original (Optional[OSError]): The underlying operating system error.

    Example:
        >>> error = ComparisonIOError("/data/a.txt", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot access /data/a.txt: [Errno 13] Permission denied'
    """

    def __init__(self, path: PathType, original: Optional[OSError] = None) -> None:
        self.path = Path(path)
        self.original = original
        detail = f": {original}" if original is not None else ""
        super().__init__(f"Cannot access {path}{detail}")


class FilterPatternError(DirCmpError, ValueError):
    """
    Exception raised when a filter pattern cannot be compiled.

    Example:
        >>> error = FilterPatternError("[a-", "unterminated character set")
        >>> str(error)
        "Invalid filter pattern '[a-': unterminated character set"
    """

    def __init__(self, pattern: str, message: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid filter pattern '{pattern}': {message}")
