"""String helpers: splitting, searching, comparing, trimming and slicing.

Search functions return an index into the text, or None when nothing is
found. Character arguments are one-character strings. The character
``"\\0"`` stands for the end of the text, as a terminator would.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_END = "\0"


def _check_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    _check_char(sep)
    return [piece for piece in text.split(sep) if piece]


def find_char(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``, or None.

    Looking for ``"\\0"`` in text that holds none gives ``len(text)``.
    """
    _check_char(ch)
    index = text.find(ch)
    if index != -1:
        return index
    return len(text) if ch == _END else None


def find_last_char(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``, or None.

    Looking for ``"\\0"`` gives ``len(text)``, where the text ends.
    """
    _check_char(ch)
    if ch == _END:
        return len(text)
    index = text.rfind(ch)
    return None if index == -1 else index


def duplicate(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> None:
    """Replace each character of ``chars`` in place by ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return f"{first}{second}"


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def compare_prefix(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings.

    Returns 0 when they agree, otherwise the difference of the code points
    at the first mismatch. A string that has ended counts as code point 0.
    """
    _check_count("limit", limit)

    def code(text: str, index: int) -> int:
        return ord(text[index]) if index < len(text) else 0

    index = 0
    while index < limit and (code(first, index) or code(second, index)):
        difference = code(first, index) - code(second, index)
        if difference:
            return difference
        index += 1
    return 0


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` in the first ``limit`` characters of ``haystack``.

    An empty needle is found at index 0. A match must end within the limit.
    """
    _check_count("limit", limit)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index == -1 else index


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start beyond the end gives the empty string.
    """
    _check_count("start", start)
    _check_count("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]