"""Recursive comparison of two directory trees."""

from . import full, light
from .entry import ComparisonEntry
from .file_compare import compare_two_files
from .options import CompareOptions

__all__ = ["CompareOptions", "ComparisonEntry", "compare_two_files", "full", "light"]
