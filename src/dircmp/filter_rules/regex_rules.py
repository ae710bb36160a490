"""Filter rules built from regular expressions.

Patterns are searched anywhere in the relative path, not anchored to the start
and not restricted to the file name, so ``r"\\.git"`` matches both ``.git/config``
and ``sub/.gitignore``.
"""

import re
from re import Pattern
from typing import List, Optional, Sequence, Union

from dircmp.exceptions import FilterPatternError

from .base_rules import BaseFilterRules

PatternLike = Union[str, Pattern[str]]


def compile_pattern(pattern: PatternLike) -> Pattern[str]:
    """Compile a pattern string, passing already compiled patterns through.

    Raises:
        FilterPatternError: If the pattern is not a valid regular expression.

    Example:
        >>> compile_pattern(r"\\.rs$").pattern
        '\\\\.rs$'
    """
    if isinstance(pattern, Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise FilterPatternError(pattern, str(e)) from e


class _RegexRules(BaseFilterRules):
    def __init__(self, patterns: Optional[Sequence[PatternLike]] = None):
        self.patterns: List[Pattern[str]] = [compile_pattern(p) for p in patterns or []]

    def add_rule(self, rule: str) -> None:
        """Compile ``rule`` and append it to the pattern set."""
        self.patterns.append(compile_pattern(rule))

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({[p.pattern for p in self.patterns]!r})"


class RegexExclusionRules(_RegexRules):
    """Exclude a path if ANY pattern matches it.

    Example:
        >>> rules = RegexExclusionRules([r"\\.git", r"__pycache__"])
        >>> rules.exclude(".git/config")
        True
        >>> rules.exclude("src/__pycache__/mod.pyc")
        True
        >>> rules.exclude("src/mod.py")
        False
    """

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        return any(pattern.search(path) for pattern in self.patterns)


class RegexInclusionRules(_RegexRules):
    """Exclude a path if ANY pattern FAILS to match it.

    A path is kept only when every pattern matches. An empty pattern set therefore
    excludes nothing.

    Example:
        >>> rules = RegexInclusionRules([r"\\.rs"])
        >>> rules.exclude("src/main.rs")
        False
        >>> rules.exclude("README.md")
        True
        >>> RegexInclusionRules().exclude("anything")
        False
    """

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        return any(not pattern.search(path) for pattern in self.patterns)
