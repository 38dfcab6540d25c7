from collections import Counter
from itertools import pairwise

import pytest

from pushswap.args import (
    ArgumentError,
    check_args,
    check_int,
    check_limits,
    parse_args,
    parse_number,
    sort_values,
)


@pytest.mark.parametrize("text", ["abc", "1a", "-", "--1", "+1", "1-", " 1", "1.5"])
def test_check_int_rejects_non_integers(text):
    with pytest.raises(ArgumentError):
        check_int(text)


@pytest.mark.parametrize(
    "text", ["2147483648", "-2147483649", "123456789012", "00000000001", "9999999999"]
)
def test_check_limits_rejects_out_of_range(text):
    with pytest.raises(ArgumentError):
        check_limits(text)


def test_check_args_rejects_empty_argument():
    with pytest.raises(ArgumentError):
        check_args(["1", ""])


def test_check_args_rejects_bad_later_argument():
    with pytest.raises(ArgumentError):
        check_args(["1", "2", "x"])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        check_args(["nope"])


def test_parse_args_accepts_int_limits():
    numbers, ordered = parse_args(["2147483647", "-2147483648"])
    assert numbers == [2147483647, -2147483648]
    assert ordered == [-2147483648, 2147483647]


def test_parse_args_keeps_input_order():
    numbers, ordered = parse_args(["3", "-1", "2"])
    assert numbers == [3, -1, 2]
    assert ordered == [-1, 2, 3]


def test_parse_args_rejects_duplicates():
    with pytest.raises(ArgumentError):
        parse_args(["5", "1", "5"])


def test_parse_args_empty():
    assert parse_args([]) == ([], [])


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-42", -42), (" \t-12", -12), ("7x3", 7), ("-2147483648", -2147483648)],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_without_digits():
    assert parse_number("+5") == parse_number("") == parse_number("abc")
    assert parse_number("abc") == 0


def test_parse_number_wraps_like_c_int():
    assert parse_number("2147483648") == -2147483648


@pytest.mark.parametrize("numbers", [[5, 3, 9, -1, 0], [1], [], [2, 1], [10, 9, 8, 7, 6]])
def test_sort_values_orders_and_preserves(numbers):
    ordered = sort_values(numbers)
    assert all(left < right for left, right in pairwise(ordered))
    assert Counter(ordered) == Counter(numbers)


def test_sort_values_rejects_duplicates_even_when_sorted():
    with pytest.raises(ArgumentError):
        sort_values([1, 2, 2, 3])