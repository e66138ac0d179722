"""Unit tests for text composition helpers."""

import pytest

from yamlresume.utils.text import (
    is_empty,
    join_non_empty,
    replace_blank_lines_with_percent,
    set_max_consecutive_blank_lines,
    show_if,
    show_if_not_empty,
)


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "  \n", [], {}, ()])
def test_is_empty_true(value):
    """Test values that count as absent."""
    assert is_empty(value)


@pytest.mark.unit
@pytest.mark.parametrize("value", ["x", [""], 0, False, {"a": 1}])
def test_is_empty_false(value):
    """Test values that are present, zero and False included."""
    assert not is_empty(value)


@pytest.mark.unit
def test_show_if():
    """Test conditional content."""
    assert show_if(True, "a") == "a"
    assert show_if(False, "a") == ""
    assert show_if_not_empty("x", "a") == "a"
    assert show_if_not_empty("  ", "a") == ""


@pytest.mark.unit
def test_join_non_empty():
    """Test that blank parts are skipped."""
    assert join_non_empty(["a", "", "  ", "b"], ", ") == "a, b"
    assert join_non_empty(["a", "b"]) == "a\n\nb"
    assert join_non_empty([]) == ""


@pytest.mark.unit
def test_replace_blank_lines_with_percent():
    """Test that blank lines become comment lines."""
    assert replace_blank_lines_with_percent("one\n\ntwo") == "one\n%\ntwo"
    assert replace_blank_lines_with_percent("one\n  \ntwo") == "one\n%\ntwo"
    assert replace_blank_lines_with_percent("\n") == ""
    assert replace_blank_lines_with_percent("one\ntwo") == "one\ntwo"


@pytest.mark.unit
def test_set_max_consecutive_blank_lines():
    """Test normalization of blank line runs."""
    assert set_max_consecutive_blank_lines("a\n\n\n\nb") == "a\n\nb"
    assert set_max_consecutive_blank_lines("a\n\n\n\nb", max_consecutive=2) == "a\n\n\nb"
    assert set_max_consecutive_blank_lines("a\n\nb", max_consecutive=0) == "a\nb"
