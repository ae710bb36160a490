"""Filter rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from dircmp.types import PathType

from .base_rules import BaseFilterRules


class GitIgnoreExclusionRules(BaseFilterRules):
    """Exclusion rules using .gitignore pattern syntax.

    Matching is delegated to the pathspec library, which follows Git's own rules:
    basic globs, directory patterns ending in ``/``, negations starting with ``!``,
    ``**`` and comment lines. Rules from files and rules added one at a time are kept
    in the order they were supplied, so later negations can re-include paths.

    Relative paths handed to the comparator's filter carry no trailing slash, even
    for directories. To let a pattern such as ``build/`` drop the ``build`` directory
    itself (and not only its children), a path flagged with ``is_dir`` is also tested
    with a slash appended. A regular file named ``build`` is kept.

    Attributes:
        spec (PathSpec): Compiled pattern matcher rebuilt whenever rules change.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.pyc")
        >>> rules.exclude("pkg/mod.pyc")
        True
        >>> rules.add_rule("build/")
        >>> rules.exclude("build", is_dir=True)
        True
        >>> rules.exclude("build")
        False
        >>> rules.add_rule("!keep.pyc")
        >>> rules.exclude("keep.pyc")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize with patterns from the given rules file(s), if any.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        if self.spec.match_file(path):
            return True
        return is_dir and not path.endswith("/") and self.spec.match_file(path + "/")

    def has_rules(self) -> bool:
        return any(line.strip() and not line.lstrip().startswith("#") for line in self._lines)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")
            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._rebuild()

    def add_rule(self, rule: str) -> None:
        self._lines.append(rule)
        self._rebuild()

    def _rebuild(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
