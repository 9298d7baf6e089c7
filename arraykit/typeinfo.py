"""Element type descriptions and the string element type."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable

from .util import ComparisonResult

Predicate = Callable[[Any], bool]
UnaryOperator = Callable[[Any], Any]


@dataclass(frozen=True)
class TypeInfo:
    """The set of operations an array uses on its elements."""

    type_name: str
    compare: Callable[[Any, Any], ComparisonResult]
    maximum: Callable[[Any, Any], Any]
    printer: Callable[[Any], None]
    parse: Callable[[str], Any]
    where_predicates: tuple[Predicate, ...] = field(default_factory=tuple)
    map_operators: tuple[UnaryOperator, ...] = field(default_factory=tuple)


def string_compare(elem1: str, elem2: str) -> ComparisonResult:
    """Compare two strings character by character.

    ``LESS`` means ``elem1`` orders before ``elem2``; a proper prefix orders first.
    """
    for char1, char2 in zip(elem1, elem2):
        if char1 != char2:
            return ComparisonResult.LESS if ord(char1) < ord(char2) else ComparisonResult.GREATER
    if len(elem1) == len(elem2):
        return ComparisonResult.EQUAL
    return ComparisonResult.LESS if len(elem1) < len(elem2) else ComparisonResult.GREATER


def string_max(arg1: str, arg2: str) -> str:
    """Return the larger of two strings, preferring the second when equal."""
    if string_compare(arg1, arg2) is ComparisonResult.GREATER:
        return arg1
    return arg2


def string_input(text: str) -> str:
    """Build a string element from input text."""
    return str(text)


def string_print(value: str) -> None:
    """Print a string element on its own line."""
    print(value)


def _all_in_ranges(arg: str, *ranges: tuple[str, str]) -> bool:
    return all(any(low <= char <= high for low, high in ranges) for char in arg)


def is_alpha(arg: str) -> bool:
    """True if every character is an ASCII letter."""
    return _all_in_ranges(arg, ("A", "Z"), ("a", "z"))


def is_digit(arg: str) -> bool:
    """True if every character is an ASCII digit."""
    return _all_in_ranges(arg, ("0", "9"))


def is_upper_case(arg: str) -> bool:
    """True if every character is an ASCII upper-case letter."""
    return _all_in_ranges(arg, ("A", "Z"))


def is_lower_case(arg: str) -> bool:
    """True if every character is an ASCII lower-case letter."""
    return _all_in_ranges(arg, ("a", "z"))


def invert_string(arg: str) -> str:
    """Return the string reversed."""
    return arg[::-1]


def to_lower_case(arg: str) -> str:
    """Lower-case ASCII letters, leaving every other character alone."""
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in arg)


def to_upper_case(arg: str) -> str:
    """Upper-case ASCII letters, leaving every other character alone."""
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in arg)


@lru_cache(maxsize=None)
def get_string_ti() -> TypeInfo:
    """Return the shared description of the string element type."""
    return TypeInfo(
        type_name="string",
        compare=string_compare,
        maximum=string_max,
        printer=string_print,
        parse=string_input,
        where_predicates=(is_alpha, is_digit, is_upper_case, is_lower_case),
        map_operators=(invert_string, to_lower_case, to_upper_case),
    )