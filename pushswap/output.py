"""Formatted output in the style of a small printf, and writers for text streams.

The format understands these conversions:

``%c``
    one character, given as a one-character string or an integer code
``%s``
    a string; None prints as ``(null)``
``%d``, ``%i``
    a signed 32-bit integer
``%u``
    an unsigned 32-bit integer
``%x``, ``%X``
    an unsigned 32-bit integer in lower- or upper-case hexadecimal
``%p``
    an address as ``0x`` and lower-case hexadecimal; zero or None prints as
    ``(nil)``
``%e``
    a string written to standard error instead of standard output

Any other character after ``%`` prints a single ``%`` and is consumed, so
``%%`` prints ``%``. A format that ends in a lone ``%`` is rejected.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from .numconv import itoa, utoa

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"

# A piece of output: whether it goes to standard error, and its text.
_Piece = tuple[bool, str]


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer."""
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any, conv: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"%{conv} needs a string, got {type(value).__name__}")
    return value


def _convert(conv: str, take: Callable[[str], Any]) -> _Piece:
    if conv == "c":
        return False, _char(take(conv))
    if conv == "s":
        value = take(conv)
        return False, _NULL_STRING if value is None else _string(value, conv)
    if conv in "di":
        return False, itoa(_wrap32(int(take(conv))))
    if conv == "u":
        return False, utoa(int(take(conv)))
    if conv == "x":
        return False, format(int(take(conv)) & _MASK32, "x")
    if conv == "X":
        return False, format(int(take(conv)) & _MASK32, "X")
    if conv == "p":
        value = take(conv)
        address = 0 if value is None else int(value) & _MASK64
        if not address:
            return False, _NULL_POINTER
        return False, "0x" + format(address, "x")
    if conv == "e":
        return True, _string(take(conv), conv)
    return False, "%"


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[_Piece]:
    if fmt is None:
        raise ValueError("the format must not be None")
    values = iter(args)

    def take(conv: str) -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conv}") from None

    pos = 0
    length = len(fmt)
    while pos < length:
        pct = fmt.find("%", pos)
        if pct == -1:
            yield False, fmt[pos:]
            return
        if pct > pos:
            yield False, fmt[pos:pct]
        if pct + 1 == length:
            raise ValueError("the format ends with a lone '%'")
        yield _convert(fmt[pct + 1], take)
        pos = pct + 2


def render(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces on standard output.

    Text from ``%e`` conversions, which goes to standard error, is left out.
    """
    return "".join(text for to_error, text in _pieces(fmt, args) if not to_error)


def printf(fmt: str, *args: Any) -> int:
    """Write ``fmt`` with ``args`` and return the number of characters written.

    The format is checked in full before anything is written. ``%e`` text
    goes to standard error and counts towards the total.
    """
    pieces = list(_pieces(fmt, args))
    for to_error, text in pieces:
        (sys.stderr if to_error else sys.stdout).write(text)
    return sum(len(text) for _, text in pieces)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(ch: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_char(ch))


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` and a newline to ``stream``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write ``number``, taken as a signed 32-bit integer, in decimal."""
    _target(stream).write(itoa(_wrap32(int(number))))