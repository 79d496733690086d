"""Byte-buffer helpers: filling, searching, comparing, copying and bounded strings.

Buffers are ``bytearray`` objects, or ``bytes`` where they are only read.
Counts and sizes are byte counts and must not exceed the buffer they refer
to. Bounded string functions treat a buffer as NUL-terminated text: the
text ends at the first zero byte, or at the end of the buffer.
"""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1

_NUL = 0


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_fits(name: str, buffer: bytes | bytearray, count: int) -> None:
    if count > len(buffer):
        raise ValueError(
            f"{name} holds {len(buffer)} bytes, {count} were asked for"
        )


def _text_length(data: bytes | bytearray, limit: int | None = None) -> int:
    """Length of the NUL-terminated text in ``data``, looking at most ``limit`` bytes."""
    end = len(data) if limit is None else min(limit, len(data))
    index = data.find(_NUL, 0, end)
    return end if index == -1 else index


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count("count", count)
    _check_fits("buffer", buffer, count)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    fill(buffer, 0, count)


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer for ``count`` elements of ``size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    _check_count("count", count)
    _check_count("size", size)
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes overflow a size")
    return bytearray(count * size)


def find_byte(buffer: bytes | bytearray, value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` (modulo 256) in the first ``count`` bytes."""
    _check_count("count", count)
    _check_fits("buffer", buffer, count)
    index = buffer.find(value & 0xFF, 0, count)
    return None if index == -1 else index


def compare_bytes(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns 0 when they agree, otherwise the difference of the unsigned
    bytes at the first mismatch.
    """
    _check_count("count", count)
    _check_fits("first", first, count)
    _check_fits("second", second, count)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def copy_bytes(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` to the start of ``dest``."""
    _check_count("count", count)
    _check_fits("src", src, count)
    _check_fits("dest", dest, count)
    dest[:count] = src[:count]
    return dest


def move_bytes(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    The two regions may overlap; the result is as if the source were read
    in full before anything was written.
    """
    _check_count("dest", dest)
    _check_count("src", src)
    _check_count("count", count)
    _check_fits("buffer", buffer, src + count)
    _check_fits("buffer", buffer, dest + count)
    if count and dest != src:
        buffer[dest : dest + count] = buffer[src : src + count]
    return buffer


def copy_bounded(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the text of ``src`` into ``dest``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive, and is cut
    short to fit. Returns the length of the text in ``src``, so a result of
    ``size`` or more means the copy was truncated.
    """
    _check_count("size", size)
    _check_fits("dest", dest, size)
    src_len = _text_length(src)
    if size == 0:
        return src_len
    copied = min(src_len, size - 1)
    dest[:copied] = src[:copied]
    dest[copied] = _NUL
    return src_len


def concat_bounded(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append the text of ``src`` to the text in ``dest``, in a buffer of ``size`` bytes.

    Returns the length the joined text would have: the length of the text
    already in ``dest`` (at most ``size``) plus the length of ``src``.
    """
    _check_count("size", size)
    _check_fits("dest", dest, size)
    src_len = _text_length(src)
    dest_len = _text_length(dest, size)
    if size <= dest_len:
        return size + src_len
    copied = min(src_len, size - dest_len - 1)
    dest[dest_len : dest_len + copied] = src[:copied]
    if dest_len + copied < size:
        dest[dest_len + copied] = _NUL
    return src_len + dest_len