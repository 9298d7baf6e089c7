"""Shared enums, errors and number parsing helpers."""

from __future__ import annotations

from enum import Enum, IntEnum


class ComparisonResult(IntEnum):
    """Outcome of comparing a first element with a second one."""

    GREATER = -1
    EQUAL = 0
    LESS = 1


class MenuDirective(IntEnum):
    """What a menu loop should do next."""

    USER_EXIT = 0
    SYSTEM_EXIT = 1
    USER_CONTINUE = 2


class ArrayKitError(Exception):
    """Base class of every error the package reports."""

    code: int = 0
    default_message: str = "Error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class MemoryAllocationError(ArrayKitError):
    """Storage for a value could not be provided."""

    code = 1
    default_message = "Error. Unable to allocate memory."


class InputOverflowError(ArrayKitError):
    """Input is longer than the allowed limit."""

    code = 2
    default_message = "Provided input exceeded allowed limit."


class UnexpectedAlphaError(ArrayKitError):
    """A non-digit character appeared where digits were expected."""

    code = 9
    default_message = "Error. Detected alphabet symbols when digits were expected."


class CmdOutOfContextError(ArrayKitError):
    """A menu command is outside the range of available commands."""

    code = 12
    default_message = "Error. Provided command is out of range of available commands."


class ZeroLengthInputError(ArrayKitError):
    """The input was empty."""

    code = 14
    default_message = "Error. Provided input is empty."


class DoubleInputError(ArrayKitError):
    """A real number contained more than one decimal point."""

    code = 15
    default_message = (
        "Error. Detected two or more decimal points when a real number was expected."
    )


class ArrayDataAllocationError(ArrayKitError):
    """Storage for array contents could not be provided."""

    code = 16
    default_message = "Error. Unable to allocate memory for keeping array contents."


def power(base: float, exponent: int) -> float:
    """Raise ``base`` to an integer ``exponent`` by repeated multiplication or division."""
    result = 1.0
    if exponent >= 0:
        for _ in range(exponent):
            result *= base
    else:
        for _ in range(-exponent):
            result /= base
    return result


def _first_line(source: str) -> str:
    """Return the text up to the first newline or NUL character."""
    return source.split("\n", 1)[0].split("\0", 1)[0]


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def char_to_int(source: str) -> int:
    """Parse a non-negative decimal integer from the first line of ``source``."""
    text = _first_line(source)
    if not text:
        raise ZeroLengthInputError()
    value = 0
    length = len(text)
    for position, char in enumerate(text):
        if not _is_ascii_digit(char):
            raise UnexpectedAlphaError()
        value += (ord(char) - ord("0")) * int(power(10, length - position - 1))
    return value


def char_to_double(source: str) -> float:
    """Parse a non-negative decimal real number from the first line of ``source``."""
    text = _first_line(source)
    if not text:
        raise ZeroLengthInputError()
    if text.count(".") > 1:
        raise DoubleInputError()

    integer_part, _, fraction_part = text.partition(".")
    value = 0.0
    integer_length = len(integer_part)
    for position, char in enumerate(integer_part):
        if not _is_ascii_digit(char):
            raise UnexpectedAlphaError()
        value += (ord(char) - ord("0")) * power(10, integer_length - position - 1)
    for position, char in enumerate(fraction_part, start=1):
        if not _is_ascii_digit(char):
            raise UnexpectedAlphaError()
        value += (ord(char) - ord("0")) * power(10, -position)
    return value