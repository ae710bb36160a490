"""Tests for custom exceptions."""

from pathlib import Path

import pytest

from dircmp.exceptions import ComparisonIOError, DirCmpError, FilterPatternError, InvalidRootError


class TestInvalidRootError:
    """Test InvalidRootError exception."""

    def test_invalid_root_error_creation(self):
        """Test creating InvalidRootError with path, side and reason."""
        error = InvalidRootError("/no/such/dir", "right", "does not exist")

        assert error.path == Path("/no/such/dir")
        assert error.side == "right"
        assert error.reason == "does not exist"
        assert str(error) == "The right path does not exist: /no/such/dir"

    def test_invalid_root_error_hierarchy(self):
        """Test that InvalidRootError can be caught as DirCmpError."""
        with pytest.raises(DirCmpError):
            raise InvalidRootError(Path("file.txt"), "left", "is not a directory")


class TestComparisonIOError:
    """Test ComparisonIOError exception."""

    def test_with_original_error(self):
        original = PermissionError(13, "Permission denied")
        error = ComparisonIOError("/data/a.txt", original)

        assert error.path == Path("/data/a.txt")
        assert error.original is original
        assert str(error) == "Cannot access /data/a.txt: [Errno 13] Permission denied"

    def test_without_original_error(self):
        error = ComparisonIOError(Path("/data/a.txt"))
        assert error.original is None
        assert str(error) == "Cannot access /data/a.txt"

    def test_is_not_an_os_error(self):
        """Callers can tell traversal failures apart from output failures."""
        assert not isinstance(ComparisonIOError("/x"), OSError)


class TestFilterPatternError:
    """Test FilterPatternError exception."""

    def test_message(self):
        error = FilterPatternError("[a-", "unterminated character set")
        assert error.pattern == "[a-"
        assert str(error) == "Invalid filter pattern '[a-': unterminated character set"

    def test_is_value_error(self):
        """Test that FilterPatternError is both a DirCmpError and a ValueError."""
        error = FilterPatternError("(", "missing )")
        assert isinstance(error, DirCmpError)
        assert isinstance(error, ValueError)
