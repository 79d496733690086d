"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. Predicates return ``bool``. Case conversions return a value of the
same kind they were given.
"""

from __future__ import annotations

CharLike = str | int


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit_code(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_alnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or decimal digit."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code) or _is_digit_code(code)


def is_ascii(c: CharLike) -> bool:
    """Return True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_digit_or_minus(c: CharLike) -> bool:
    """Return True for a decimal digit or a minus sign.

    This is the check used when validating numeric arguments, where a
    leading minus sign is part of a number.
    """
    code = _code(c)
    return _is_digit_code(code) or code == ord("-")


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if not _is_lower_code(code):
        return c
    upper = code & ~32
    return chr(upper) if isinstance(c, str) else upper


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if not _is_upper_code(code):
        return c
    lower = code | 32
    return chr(lower) if isinstance(c, str) else lower