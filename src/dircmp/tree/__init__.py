"""Directory listing and alignment of two trees by relative path."""

from .aligner import AlignedEntry, AlignmentKind, zip_dir_entries
from .file_lister import get_file_type, list_files

__all__ = ["AlignedEntry", "AlignmentKind", "get_file_type", "list_files", "zip_dir_entries"]
