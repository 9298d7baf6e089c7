import pytest

from arraykit.typeinfo import (
    get_string_ti,
    invert_string,
    is_alpha,
    is_digit,
    is_lower_case,
    is_upper_case,
    string_compare,
    string_input,
    string_max,
    string_print,
    to_lower_case,
    to_upper_case,
)
from arraykit.util import ComparisonResult


def test_compare_equal():
    assert string_compare("abc", "abc") is ComparisonResult.EQUAL


def test_compare_differing_character():
    assert string_compare("abc", "abd") is ComparisonResult.LESS
    assert string_compare("abd", "abc") is ComparisonResult.GREATER


def test_compare_prefix_orders_first():
    assert string_compare("ab", "abc") is ComparisonResult.LESS
    assert string_compare("abc", "ab") is ComparisonResult.GREATER


@pytest.mark.parametrize(
    "left,right", [("apple", "banana"), ("Z", "a"), ("", "x"), ("same", "same"), ("b", "ab")]
)
def test_compare_is_antisymmetric(left, right):
    assert string_compare(left, right) == -string_compare(right, left)


@pytest.mark.parametrize("left,right", [("apple", "banana"), ("zeta", "alpha"), ("ab", "abc")])
def test_max_returns_larger(left, right):
    larger = string_max(left, right)
    assert larger in (left, right)
    assert string_compare(larger, left) is not ComparisonResult.LESS
    assert string_compare(larger, right) is not ComparisonResult.LESS


def test_string_input_copies_text():
    assert string_input("hello world") == "hello world"


def test_string_print(capsys):
    string_print("hello")
    assert capsys.readouterr().out == "hello\n"


@pytest.mark.parametrize(
    "func,text,expected",
    [
        (is_alpha, "abcXYZ", True),
        (is_alpha, "ab1", False),
        (is_alpha, "", True),
        (is_digit, "0123", True),
        (is_digit, "12a", False),
        (is_upper_case, "ABC", True),
        (is_upper_case, "AbC", False),
        (is_lower_case, "abc", True),
        (is_lower_case, "abC", False),
    ],
)
def test_predicates(func, text, expected):
    assert func(text) is expected


def test_invert_string():
    assert invert_string("abc") == "cba"


@pytest.mark.parametrize("text", ["", "a", "hello", "racecar"])
def test_invert_twice_is_identity(text):
    assert invert_string(invert_string(text)) == text


@pytest.mark.parametrize("text", ["Hello World", "abc", "MiXeD123"])
def test_case_conversion_matches_ascii(text):
    assert to_lower_case(text) == text.lower()
    assert to_upper_case(text) == text.upper()


def test_case_conversion_leaves_non_ascii():
    assert to_upper_case("\u00e9a") == "\u00e9A"


def test_string_ti_is_shared_and_named():
    ti = get_string_ti()
    assert ti is get_string_ti()
    assert ti.type_name == "string"
    assert ti.compare("a", "b") is ComparisonResult.LESS
    assert ti.parse("word") == "word"


def test_string_ti_operations():
    ti = get_string_ti()
    assert [op("Ab") for op in ti.map_operators] == [invert_string("Ab"), "ab", "AB"]
    assert [pred("abc") for pred in ti.where_predicates] == [True, False, False, True]