"""Filter rules deciding which relative paths take part in a comparison."""

from .base_rules import BaseFilterRules, should_exclude
from .composite_rules import CompositeFilterRules
from .git_rules import GitIgnoreExclusionRules
from .regex_rules import RegexExclusionRules, RegexInclusionRules

__all__ = [
    "BaseFilterRules",
    "CompositeFilterRules",
    "GitIgnoreExclusionRules",
    "RegexExclusionRules",
    "RegexInclusionRules",
    "should_exclude",
]
