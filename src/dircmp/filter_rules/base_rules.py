from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from dircmp.types import PathType


class BaseFilterRules(ABC):
    """
    Abstract base class defining the interface for relative-path filter rules.

    A filter decides, for a path expressed relative to one comparison root, whether
    that path is dropped before the two trees are aligned. The same filter is applied
    independently to the left and right listings, so a path excluded on one side only
    can still surface as a one-sided entry from the other side.

    Implementations must provide ``exclude``. Loading rules from files and adding
    individual rules are optional capabilities that depend on the rule type.

    Example:
        >>> from dircmp.filter_rules.regex_rules import RegexExclusionRules
        >>> rules = RegexExclusionRules([r"\\.git"])
        >>> rules.exclude(".git/config")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """
        Determine if a given relative path should be excluded.

        Args:
            path (str): The path to check, relative to the root of the side being
                listed and using forward slashes as separators.
            is_dir (bool): Whether the path names a real directory. Rule types with
                directory-only patterns use this; others ignore it.

        Returns:
            bool: True if the path should be excluded, False if it should be kept.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether any rule is configured.

        Rule types that cannot be empty use this default, which returns True.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule directly.

        Args:
            rule (str): The rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")


def should_exclude(relative_path: str, filter_rules: Optional[BaseFilterRules], is_dir: bool = False) -> bool:
    """Return True if ``relative_path`` is dropped by ``filter_rules``.

    An absent filter keeps everything.

    Example:
        >>> should_exclude(".git/config", None)
        False
    """
    if filter_rules is None:
        return False
    return filter_rules.exclude(relative_path, is_dir)
