"""JSON Lines output strategy for comparison results."""

import json
from pathlib import Path
from typing import Dict, Optional

from dircmp.comparison.entry import ComparisonEntry

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that writes one JSON object per record.

    Each line has the following structure, with ``left`` or ``right`` set to null
    for one-sided records:
    {
        "status": "different",
        "path": "relative/path/to/file",
        "left": "/left/root/relative/path/to/file",
        "right": "/right/root/relative/path/to/file"
    }

    Attributes:
        encoder: JSON encoder instance used for consistent escaping.

    Example:
        >>> strategy = JSONOutputStrategy()
        >>> strategy.format_entry(ComparisonEntry.right_only("c.txt", Path("r/c.txt")))
        '{"status": "right_only", "path": "c.txt", "left": null, "right": "r/c.txt"}\\n'
    """

    def __init__(self) -> None:
        self.encoder = json.JSONEncoder()

    def format_header(self, left_root: Path, right_root: Path) -> str:
        return ""

    def format_entry(self, entry: ComparisonEntry) -> str:
        data: Dict[str, Optional[str]] = {
            "status": entry.status.value,
            "path": entry.relative_path,
            "left": _path_or_none(entry.left),
            "right": _path_or_none(entry.right),
        }
        return self.encoder.encode(data) + "\n"

    def format_footer(self) -> str:
        return ""

    def get_file_extension(self) -> str:
        return ".jsonl"


def _path_or_none(path: Optional[Path]) -> Optional[str]:
    return str(path) if path is not None else None
