"""High-level interface for comparing two directory trees.

This module provides the DirComparison class, which validates both roots up front,
runs the selected comparator lazily, caches its result and exposes per-status
counts for summary reporting.
"""

import logging
from collections import Counter
from typing import Dict, Iterator, List, Optional, Union

from dircmp.comparison import full, light
from dircmp.comparison.engine import validate_roots
from dircmp.comparison.entry import ComparisonEntry
from dircmp.comparison.options import CompareOptions
from dircmp.types import ComparisonPolicy, EntryStatus, PathType

logger = logging.getLogger(__name__)


class DirComparison:
    """Comparison of a left and a right directory tree.

    The roots are checked when the object is created, so an invalid root is reported
    before any traversal. The comparison itself runs on first access to the entries
    or counts and is cached afterwards; call ``refresh`` to run it again after the
    trees have changed.

    Attributes:
        left_root (Path): Root of the left tree.
        right_root (Path): Root of the right tree.
        options (CompareOptions): Options handed to the comparator.
        policy (ComparisonPolicy): Which comparator variant runs.

    Example:
        >>> comparison = DirComparison("old", "new")  # doctest: +SKIP
        >>> for entry in comparison.iter_entries():  # doctest: +SKIP
        ...     print(entry.status.value, entry.relative_path)
        equal a.txt
        left_only b.txt
        right_only c.txt
        >>> comparison.counts["equal"]  # doctest: +SKIP
        1

    Raises:
        InvalidRootError: If either root is missing or is not a directory.
        ValueError: If the policy name is unknown.
    """

    def __init__(
        self,
        left_root: PathType,
        right_root: PathType,
        *,
        options: Optional[CompareOptions] = None,
        policy: Union[str, ComparisonPolicy] = ComparisonPolicy.FULL,
    ):
        """Initialize the comparison.

        Args:
            left_root: Root of the left tree. Can be any path-like object.
            right_root: Root of the right tree. Can be any path-like object.
            options: Comparison options. Defaults to reporting everything.
            policy: Comparator variant, either "full" or "light", or a
                ComparisonPolicy value. Defaults to FULL.

        Raises:
            InvalidRootError: If either root is missing or is not a directory.
            ValueError: If the policy name is unknown.
        """
        if isinstance(policy, str):
            try:
                policy = ComparisonPolicy(policy.lower())
            except ValueError:
                raise ValueError(f"Invalid policy: {policy}. Must be one of: 'full', 'light'")

        self.left_root, self.right_root = validate_roots(left_root, right_root)
        self.options = options if options is not None else CompareOptions()
        self.policy = policy
        self._entries: Optional[List[ComparisonEntry]] = None

    @property
    def entries(self) -> List[ComparisonEntry]:
        """The classified entries, running the comparison if needed.

        Raises:
            ComparisonIOError: If a directory or file cannot be read during traversal.
        """
        if self._entries is None:
            self._entries = self._run()
        return self._entries

    def iter_entries(self) -> Iterator[ComparisonEntry]:
        """Iterate over the classified entries."""
        yield from self.entries

    def _run(self) -> List[ComparisonEntry]:
        compare = full.compare_dirs if self.policy is ComparisonPolicy.FULL else light.compare_dirs
        logger.debug("Running %s comparison", self.policy.value)
        return compare(self.left_root, self.right_root, self.options)

    @property
    def counts(self) -> Dict[str, int]:
        """Number of entries per status, keyed by status value.

        Every status is present, with zero for those that did not occur.
        """
        tally = Counter(entry.status for entry in self.entries)
        return {status.value: tally.get(status, 0) for status in EntryStatus}

    @property
    def is_identical(self) -> bool:
        """True if no entry other than EQUAL was produced."""
        return not any(entry.is_difference for entry in self.entries)

    def filter_status(self, *statuses: EntryStatus) -> List[ComparisonEntry]:
        """Return the entries whose status is one of ``statuses``."""
        return [entry for entry in self.entries if entry.status in statuses]

    def refresh(self) -> None:
        """Discard cached results so the next access compares the trees again."""
        self._entries = None

    def __repr__(self) -> str:
        return f"DirComparison({str(self.left_root)!r}, {str(self.right_root)!r}, policy={self.policy.value!r})"

