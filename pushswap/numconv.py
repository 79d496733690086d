"""Conversions between decimal text and integers with C integer widths."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str) -> int:
    """Parse leading whitespace, one optional sign and a run of digits."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text`` as a 32-bit signed int.

    Anything after the digits is ignored, text without digits gives 0, and
    values beyond the 32-bit range wrap around.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Read a leading decimal integer from ``text`` as a 64-bit signed long."""
    return _wrap(_parse(text), 64)


def itoa(number: int) -> str:
    """Format a signed integer in decimal."""
    return str(int(number))


def utoa(number: int) -> str:
    """Format an integer as a 32-bit unsigned value in decimal."""
    return str(int(number) & 0xFFFFFFFF)