"""Output strategy base class defining how comparison results are rendered.

A strategy turns the sequence of ComparisonEntry records produced by a comparator
into text. Rendering is split into a header, one chunk per entry and a footer so the
CLI can write results as they are formatted.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Iterator

from dircmp.comparison.entry import ComparisonEntry


class OutputStrategy(ABC):
    """Abstract base class for comparison result formatting strategies.

    Example:
        >>> class CountingStrategy(OutputStrategy):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def format_header(self, left_root, right_root):
        ...         return ""
        ...     def format_entry(self, entry):
        ...         self.count += 1
        ...         return ""
        ...     def format_footer(self):
        ...         return f"{self.count} entries\\n"
        ...     def get_file_extension(self):
        ...         return ".txt"
        >>> "".join(CountingStrategy().render(Path("l"), Path("r"), []))
        '0 entries\\n'
    """

    @abstractmethod
    def format_header(self, left_root: Path, right_root: Path) -> str:
        """Format whatever precedes the first entry.

        Args:
            left_root: Root of the left tree.
            right_root: Root of the right tree.

        Returns:
            The header string, possibly empty.
        """
        pass

    @abstractmethod
    def format_entry(self, entry: ComparisonEntry) -> str:
        """Format a single comparison record.

        Strategies that need the whole result before producing output may
        accumulate entries here and return an empty string.
        """
        pass

    @abstractmethod
    def format_footer(self) -> str:
        """Format whatever follows the last entry."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format, including the dot."""
        pass

    def render(self, left_root: Path, right_root: Path, entries: Iterable[ComparisonEntry]) -> Iterator[str]:
        """Yield the non-empty chunks of the complete rendering."""
        header = self.format_header(left_root, right_root)
        if header:
            yield header
        for entry in entries:
            chunk = self.format_entry(entry)
            if chunk:
                yield chunk
        footer = self.format_footer()
        if footer:
            yield footer
