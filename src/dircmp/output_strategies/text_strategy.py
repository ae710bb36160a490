"""Plain text output strategy: one record per line."""

from pathlib import Path

from dircmp.comparison.entry import ComparisonEntry

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Write each record on its own line in its debug form.

    Example:
        >>> strategy = TextOutputStrategy()
        >>> strategy.format_entry(ComparisonEntry.left_only("b.txt", Path("left/b.txt")))
        'LeftOnly(left/b.txt)\\n'
    """

    def format_header(self, left_root: Path, right_root: Path) -> str:
        return ""

    def format_entry(self, entry: ComparisonEntry) -> str:
        return f"{entry}\n"

    def format_footer(self) -> str:
        return ""

    def get_file_extension(self) -> str:
        return ".txt"
