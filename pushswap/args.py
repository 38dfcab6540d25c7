"""Validation and parsing of the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise, takewhile

INT_MAX_TEXT = "2147483647"
INT_MIN_TEXT = "-2147483648"

_DIGITS = frozenset("0123456789")
_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the arguments are not distinct 32-bit integers."""


def check_int(text: str) -> None:
    """Require an optional leading minus followed only by decimal digits."""
    body = text[1:] if text.startswith("-") and text[1:2] in _DIGITS else text
    if not all(char in _DIGITS for char in body):
        raise ArgumentError(f"not an integer: {text!r}")


def check_limits(text: str) -> None:
    """Require the textual integer to fit into a signed 32-bit int."""
    too_long = len(text) > len(INT_MIN_TEXT)
    below_min = len(text) == len(INT_MIN_TEXT) and text > INT_MIN_TEXT
    above_max = len(text) == len(INT_MAX_TEXT) and text > INT_MAX_TEXT
    if too_long or below_min or above_max:
        raise ArgumentError(f"out of range: {text!r}")


def check_args(args: Iterable[str]) -> None:
    """Validate every argument, raising ArgumentError on the first bad one."""
    for text in args:
        if not text:
            raise ArgumentError("empty argument")
        check_int(text)
        check_limits(text)


def parse_number(text: str) -> int:
    """Read a leading decimal integer the way C's atoi does, as a 32-bit int.

    Leading whitespace is skipped, a single minus sign is honoured and
    reading stops at the first non-digit.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, rest))
    value = sign * int(digits) if digits else 0
    return ((value + 2**31) % 2**32) - 2**31


def sort_values(numbers: Iterable[int]) -> list[int]:
    """Return the numbers in ascending order; duplicates are an error."""
    ordered = sorted(numbers)
    for left, right in pairwise(ordered):
        if left == right:
            raise ArgumentError(f"duplicate value: {left}")
    return ordered


def parse_args(args: Sequence[str]) -> tuple[list[int], list[int]]:
    """Validate the arguments and return them as given and in sorted order."""
    args = list(args)
    check_args(args)
    numbers = [parse_number(text) for text in args]
    return numbers, sort_values(numbers)