"""Directory tree comparison utilities.

This package provides tools for aligning two directory hierarchies by relative
path and reporting which entries are equal, different, or present on only one side.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dircmp")
except PackageNotFoundError:
    __version__ = "unknown"
