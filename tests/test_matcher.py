"""
tests/test_matcher.py
"""
from __future__ import annotations

import pytest

from blog.services.matcher import matches, whole_word
from blog.utils.errors import InvalidPatternError


def test_partial_match_anywhere_in_text():
    assert matches("the food court", "foo")
    assert matches("x" * 50 + "needle", "needle")


def test_case_insensitive():
    assert matches("Hello WORLD", "world")
    assert matches("hello world", "WORLD")


def test_no_match():
    assert not matches("nothing here", "absent")


def test_none_text_is_empty():
    assert not matches(None, "a")
    assert matches(None, "^$")


def test_regex_syntax_supported():
    assert matches("order #1234", r"#\d{4}")
    assert matches("bar", "ba[rz]")
    assert not matches("bat", "ba[rz]")


def test_invalid_pattern_raises():
    with pytest.raises(InvalidPatternError) as exc:
        matches("anything", "(unclosed")
    assert exc.value.error_key == "invalidPattern"
    assert exc.value.pattern == "(unclosed"


def test_whole_word_respects_boundaries():
    pattern = whole_word("sad")
    assert matches("I am sad today", pattern)
    assert matches("Sad.", pattern)
    assert not matches("sadness", pattern)
    assert not matches("crusade", pattern)


def test_whole_word_escapes_metacharacters():
    assert not matches("aXb", whole_word("a.b"))
    assert matches("a.b here", whole_word("a.b"))
