"""Test configuration and fixtures for dircmp."""

import os
from pathlib import Path
from typing import Callable, Dict, Union

import pytest

TreeSpec = Dict[str, Union[str, bytes, dict, None]]


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def build_tree(root: Path, spec: TreeSpec) -> Path:
    """Create files and directories under ``root`` from a nested dict.

    String or bytes values become files with that content, dict values become
    subdirectories and None becomes an empty directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in spec.items():
        path = root / name
        if isinstance(value, dict):
            build_tree(path, value)
        elif value is None:
            path.mkdir()
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_text(value)
    return root


@pytest.fixture
def make_tree(tmp_path) -> Callable[[str, TreeSpec], Path]:
    """Factory building a directory tree named ``name`` inside tmp_path."""

    def _make(name: str, spec: TreeSpec) -> Path:
        return build_tree(tmp_path / name, spec)

    return _make


@pytest.fixture
def symlinks_supported(tmp_path) -> bool:
    """Whether the platform lets this process create symlinks."""
    probe = tmp_path / "symlink_probe"
    try:
        os.symlink(tmp_path, probe)
    except (OSError, NotImplementedError):
        return False
    probe.unlink()
    return True
