"""Composite filter rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseFilterRules


class CompositeFilterRules(BaseFilterRules):
    """Filter rules that combine several rule sets with a logical OR.

    A path is excluded if ANY constituent excludes it. This is how the command line
    combines regex filters with gitignore-style patterns.

    Attributes:
        rules (List[BaseFilterRules]): Constituent rule sets, evaluated in order.

    Example:
        >>> from dircmp.filter_rules.regex_rules import RegexExclusionRules
        >>> from dircmp.filter_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("*.log")
        >>> composite = CompositeFilterRules([RegexExclusionRules([r"^\\.git"]), git_rules])
        >>> composite.exclude(".git/HEAD")
        True
        >>> composite.exclude("logs/app.log")
        True
        >>> composite.exclude("src/app.py")
        False
    """

    def __init__(self, rules: Sequence[BaseFilterRules]):
        """Initialize composite filter rules.

        Raises:
            ValueError: If ``rules`` is empty.
            TypeError: If any rule doesn't implement BaseFilterRules.
        """
        if not rules:
            raise ValueError("At least one filter rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseFilterRules):
                raise TypeError(f"Rule at index {i} must implement BaseFilterRules, got {type(rule)}")

        self.rules: List[BaseFilterRules] = list(rules)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        return any(rule.exclude(path, is_dir) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseFilterRules) -> None:
        """Append another rule set.

        Raises:
            TypeError: If rule doesn't implement BaseFilterRules.
        """
        if not isinstance(rule, BaseFilterRules):
            raise TypeError(f"Rule must implement BaseFilterRules, got {type(rule)}")
        self.rules.append(rule)

    def get_rules(self) -> List[BaseFilterRules]:
        """Return a copy of the constituent rules list."""
        return list(self.rules)
