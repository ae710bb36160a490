"""Unit tests for entry classification and flat file listing."""

import os

import pytest

from dircmp.exceptions import ComparisonIOError
from dircmp.tree.file_lister import get_file_type, list_directory, list_files
from dircmp.types import FileType


def test_get_file_type(make_tree):
    root = make_tree("root", {"file.txt": "x", "dir": {}})
    assert get_file_type(root / "file.txt") is FileType.FILE
    assert get_file_type(root / "dir") is FileType.DIRECTORY
    assert get_file_type(root / "missing") is None


def test_get_file_type_symlink_not_followed(make_tree, symlinks_supported):
    if not symlinks_supported:
        pytest.skip("Symlink creation not supported on this platform/environment")
    root = make_tree("root", {"dir": {}, "file.txt": "x"})
    os.symlink(root / "dir", root / "dir_link")
    os.symlink(root / "file.txt", root / "file_link")
    os.symlink(root / "nowhere", root / "broken_link")
    assert get_file_type(root / "dir_link") is FileType.SYMLINK
    assert get_file_type(root / "file_link") is FileType.SYMLINK
    assert get_file_type(root / "broken_link") is FileType.SYMLINK


def test_list_directory_sorted(make_tree):
    root = make_tree("root", {"c": "", "a": "", "b": {}})
    assert list_directory(root) == [root / "a", root / "b", root / "c"]


def test_list_directory_missing_raises(tmp_path):
    with pytest.raises(ComparisonIOError, match="Cannot access"):
        list_directory(tmp_path / "missing")


def test_list_files_flattens_depth_first(make_tree):
    root = make_tree(
        "root",
        {
            "b.txt": "",
            "a": {"z.txt": "", "deeper": {"y.txt": ""}},
            "empty": None,
        },
    )
    assert list_files(root) == [
        root / "a" / "deeper" / "y.txt",
        root / "a" / "z.txt",
        root / "b.txt",
    ]


def test_list_files_empty_directory(make_tree):
    assert list_files(make_tree("root", {})) == []


def test_list_files_skips_symlinks(make_tree, symlinks_supported):
    if not symlinks_supported:
        pytest.skip("Symlink creation not supported on this platform/environment")
    root = make_tree("root", {"real.txt": "", "sub": {"inner.txt": ""}})
    os.symlink(root / "real.txt", root / "link.txt")
    os.symlink(root / "sub", root / "sub_link")
    os.symlink(root, root / "sub" / "loop")
    assert list_files(root) == [root / "real.txt", root / "sub" / "inner.txt"]
