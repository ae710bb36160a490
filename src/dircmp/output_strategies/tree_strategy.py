"""Tree output strategy rendering comparison results like the Unix 'tree' command."""

from pathlib import Path
from typing import Dict

from anytree import Node, RenderTree

from dircmp.comparison.entry import ComparisonEntry
from dircmp.types import EntryStatus

from .base_strategy import OutputStrategy

_MARKERS = {
    EntryStatus.EQUAL: "=",
    EntryStatus.DIFFERENT: "!",
    EntryStatus.LEFT_ONLY: "<",
    EntryStatus.RIGHT_ONLY: ">",
    EntryStatus.TYPE_MISMATCH: "?",
}


class TreeOutputStrategy(OutputStrategy):
    """Collect records into a tree keyed by relative path and render it at the end.

    Directories are built from the components of the relative paths. Each leaf is
    prefixed with a one-character marker: ``=`` equal, ``!`` different, ``<`` left
    only, ``>`` right only, ``?`` type mismatch.

    Example:
        >>> strategy = TreeOutputStrategy()
        >>> strategy.format_header(Path("old"), Path("new"))
        ''
        >>> strategy.format_entry(ComparisonEntry.left_only("d/x.txt", Path("old/d/x.txt")))
        ''
        >>> print(strategy.format_footer(), end="")
        old <-> new
        └── d/
            └── < x.txt
    """

    def __init__(self) -> None:
        self._root = Node(".")
        self._directories: Dict[str, Node] = {"": self._root}

    def format_header(self, left_root: Path, right_root: Path) -> str:
        self._root = Node(f"{left_root.name or left_root} <-> {right_root.name or right_root}")
        self._directories = {"": self._root}
        return ""

    def format_entry(self, entry: ComparisonEntry) -> str:
        *parents, leaf = entry.relative_path.split("/")
        parent = self._directory_node("/".join(parents))
        Node(f"{_MARKERS[entry.status]} {leaf}", parent=parent)
        return ""

    def format_footer(self) -> str:
        return "".join(f"{pre}{node.name}\n" for pre, _, node in RenderTree(self._root))

    def get_file_extension(self) -> str:
        return ".txt"

    def _directory_node(self, relative_dir: str) -> Node:
        node = self._directories.get(relative_dir)
        if node is not None:
            return node
        head, _, name = relative_dir.rpartition("/")
        node = Node(f"{name}/", parent=self._directory_node(head))
        self._directories[relative_dir] = node
        return node
