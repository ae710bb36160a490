"""Unit tests for composite filter rules."""

import pytest

from dircmp.filter_rules.base_rules import BaseFilterRules
from dircmp.filter_rules.composite_rules import CompositeFilterRules
from dircmp.filter_rules.git_rules import GitIgnoreExclusionRules
from dircmp.filter_rules.regex_rules import RegexExclusionRules, RegexInclusionRules


class MockFilterRules(BaseFilterRules):
    """Mock filter rules excluding an explicit set of paths."""

    def __init__(self, excluded=None, has_rules_result=True):
        self.excluded = set(excluded or [])
        self.has_rules_result = has_rules_result
        self.calls = []
        self.dir_flags = []

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        self.calls.append(path)
        self.dir_flags.append(is_dir)
        return path in self.excluded

    def has_rules(self) -> bool:
        return self.has_rules_result


class TestCompositeFilterRules:
    """Test the CompositeFilterRules class."""

    def test_init_with_empty_rules(self):
        with pytest.raises(ValueError, match="At least one filter rule must be provided"):
            CompositeFilterRules([])

    def test_init_with_invalid_rule_type(self):
        with pytest.raises(TypeError, match="Rule at index 1 must implement BaseFilterRules"):
            CompositeFilterRules([MockFilterRules(), "invalid"])

    def test_exclude_when_any_rule_excludes(self):
        composite = CompositeFilterRules([MockFilterRules(["a"]), MockFilterRules(["b"])])
        assert composite.exclude("a")
        assert composite.exclude("b")
        assert not composite.exclude("c")

    def test_short_circuits_on_first_exclusion(self):
        first = MockFilterRules(["a"])
        second = MockFilterRules()
        CompositeFilterRules([first, second]).exclude("a")
        assert first.calls == ["a"]
        assert second.calls == []

    def test_forwards_directory_flag(self):
        first = MockFilterRules()
        second = MockFilterRules()
        composite = CompositeFilterRules([first, second])
        composite.exclude("build", is_dir=True)
        composite.exclude("build")
        assert first.dir_flags == [True, False]
        assert second.dir_flags == [True, False]

    def test_gitignore_directory_pattern_through_composite(self):
        git_rules = GitIgnoreExclusionRules()
        git_rules.add_rule("build/")
        composite = CompositeFilterRules([RegexExclusionRules([r"\.tmp$"]), git_rules])
        assert composite.exclude("build", is_dir=True)
        assert not composite.exclude("build")

    def test_has_rules(self):
        assert not CompositeFilterRules([MockFilterRules(has_rules_result=False)]).has_rules()
        assert CompositeFilterRules(
            [MockFilterRules(has_rules_result=False), MockFilterRules(has_rules_result=True)]
        ).has_rules()

    def test_add_rule_object(self):
        composite = CompositeFilterRules([MockFilterRules()])
        composite.add_rule_object(MockFilterRules(["x"]))
        assert len(composite.get_rules()) == 2
        assert composite.exclude("x")

    def test_add_rule_object_rejects_invalid(self):
        composite = CompositeFilterRules([MockFilterRules()])
        with pytest.raises(TypeError, match="Rule must implement BaseFilterRules"):
            composite.add_rule_object(object())

    def test_get_rules_returns_copy(self):
        composite = CompositeFilterRules([MockFilterRules()])
        composite.get_rules().clear()
        assert len(composite.get_rules()) == 1

    def test_add_rule_not_supported(self):
        composite = CompositeFilterRules([MockFilterRules()])
        with pytest.raises(NotImplementedError):
            composite.add_rule("*.tmp")

    def test_regex_and_git_rules_combined(self):
        git_rules = GitIgnoreExclusionRules()
        git_rules.add_rule("*.log")
        composite = CompositeFilterRules([RegexExclusionRules([r"^\.git"]), RegexInclusionRules([r"^src"]), git_rules])
        assert composite.exclude(".git/HEAD")
        assert composite.exclude("docs/readme.md")
        assert composite.exclude("src/debug.log")
        assert not composite.exclude("src/app.py")
