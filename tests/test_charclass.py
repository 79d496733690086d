import string

import pytest

from pushswap.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit_or_minus,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits_are_alnum_not_alpha(ch):
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True
    assert is_digit_or_minus(ch) is True


@pytest.mark.parametrize("ch", ["-", "+", " ", "@", "[", "`", "{", "/", ":"])
def test_punctuation_is_not_alnum(ch):
    assert is_alpha(ch) is False
    assert is_alnum(ch) is False


def test_minus_counts_as_digit():
    assert is_digit_or_minus("-") is True
    assert is_digit_or_minus("+") is False
    assert is_digit_or_minus("a") is False


def test_integer_codes_accepted():
    assert is_alpha(ord("q")) is True
    assert is_alnum(0) is False
    assert is_alnum(-1) is False


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_to_upper_matches_str_upper(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", list(string.ascii_uppercase))
def test_to_lower_matches_str_lower(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", ["0", "-", " ", "@", "[", "~"])
def test_case_conversion_leaves_others(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_of_codes_returns_codes():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(-1) == -1
    assert to_lower(48) == 48


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")