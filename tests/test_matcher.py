"""Tests for matcher predicates and filter options"""

import pytest
from pydantic import ValidationError

from linegrep.matcher import InvalidPatternError, compile_matcher, compile_regex
from linegrep.models import FilterOptions


class TestCompileMatcher:
    """Tests for compile_matcher()"""

    def test_regex_searches_anywhere_in_line(self):
        matches = compile_matcher('wor.d', FilterOptions())
        assert matches('hello world')
        assert not matches('hello')

    def test_regex_anchors(self):
        matches = compile_matcher('^(error|fatal):', FilterOptions())
        assert matches('error: disk full')
        assert matches('fatal: out of memory')
        assert not matches('warning: error: nested')

    def test_regex_is_case_sensitive_by_default(self):
        matches = compile_matcher('hello', FilterOptions())
        assert not matches('Hello')

    def test_regex_ignore_case(self):
        matches = compile_matcher('hello', FilterOptions(ignore_case=True))
        assert matches('HeLLo there')

    def test_literal_does_not_interpret_metacharacters(self):
        matches = compile_matcher('a.c', FilterOptions(literal=True))
        assert matches('xa.cx')
        assert not matches('abc')

    def test_literal_is_case_sensitive_by_default(self):
        matches = compile_matcher('Error', FilterOptions(literal=True))
        assert matches('Error here')
        assert not matches('error here')

    def test_literal_ignore_case(self):
        matches = compile_matcher('ErRoR', FilterOptions(literal=True, ignore_case=True))
        assert matches('an ERROR occurred')
        assert matches('error')
        assert not matches('err or')

    def test_invert_regex(self):
        matches = compile_matcher('x', FilterOptions(invert=True))
        assert matches('abc')
        assert not matches('xyz')

    def test_invert_literal_ignore_case(self):
        matches = compile_matcher('X', FilterOptions(invert=True, literal=True, ignore_case=True))
        assert matches('abc')
        assert not matches('xyz')

    def test_empty_pattern_matches_every_line(self):
        assert compile_matcher('', FilterOptions())('')
        assert compile_matcher('', FilterOptions(literal=True))('anything')

    def test_invalid_regex(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_matcher('(unclosed', FilterOptions())
        assert exc_info.value.pattern == '(unclosed'
        assert '(unclosed' in str(exc_info.value)

    def test_invalid_regex_with_ignore_case(self):
        with pytest.raises(InvalidPatternError):
            compile_matcher('*abc', FilterOptions(ignore_case=True))

    def test_invalid_pattern_error_is_value_error(self):
        with pytest.raises(ValueError):
            compile_regex('[z-a]')


class TestFilterOptions:
    """Tests for FilterOptions"""

    def test_defaults(self):
        options = FilterOptions()
        assert options.before_window == 0
        assert options.after_window == 0
        assert not options.count_only
        assert not options.literal

    def test_windows_include_symmetric_context(self):
        options = FilterOptions(before_context=1, after_context=4, context=2)
        assert options.before_window == 3
        assert options.after_window == 6

    @pytest.mark.parametrize('field', ['before_context', 'after_context', 'context'])
    def test_negative_context_rejected(self, field):
        with pytest.raises(ValidationError):
            FilterOptions(**{field: -1})

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            FilterOptions(word_regexp=True)

    def test_options_are_immutable(self):
        options = FilterOptions()
        with pytest.raises(ValidationError):
            options.invert = True
