import pytest

from pushswap.memory import (
    SIZE_MAX,
    compare_bytes,
    concat_bounded,
    copy_bounded,
    copy_bytes,
    fill,
    find_byte,
    move_bytes,
    zero,
    zeroed,
)


def _text(buffer):
    end = buffer.find(0)
    return bytes(buffer if end == -1 else buffer[:end])


def test_fill_sets_prefix_only():
    buffer = bytearray(b"String")
    result = fill(buffer, 48, 5)
    assert result is buffer
    assert buffer == bytearray(b"00000g")


def test_fill_wraps_value():
    buffer = bytearray(3)
    fill(buffer, 0x141, 3)
    assert buffer == bytearray([0x41] * 3)


def test_fill_rejects_count_beyond_buffer():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


def test_zero_clears_first_bytes():
    buffer = bytearray(b"String")
    zero(buffer, 1)
    assert buffer == bytearray(b"\0tring")


def test_zeroed_is_all_zero():
    buffer = zeroed(5, 4)
    assert len(buffer) == 20
    assert not any(buffer)


def test_zeroed_empty_when_count_or_size_zero():
    assert zeroed(0, 4) == bytearray()
    assert zeroed(4, 0) == bytearray()


def test_zeroed_overflow():
    with pytest.raises(OverflowError):
        zeroed(SIZE_MAX, 2)


def test_zeroed_rejects_negative():
    with pytest.raises(ValueError):
        zeroed(-1, 1)


def test_find_byte_within_count():
    data = b"Hello World!"
    assert find_byte(data, ord("o"), 5) == 4
    assert find_byte(data, ord("W"), 5) is None


def test_find_byte_not_present():
    assert find_byte(b"abc", ord("z"), 3) is None


def test_compare_bytes_equal_prefix():
    assert compare_bytes(b"abcX", b"abcY", 3) == 0
    assert compare_bytes(b"", b"", 0) == 0


def test_compare_bytes_sign_and_antisymmetry():
    low, high = b"abcA", b"abcZ"
    forward = compare_bytes(low, high, 4)
    backward = compare_bytes(high, low, 4)
    assert forward < 0
    assert backward == -forward


def test_compare_bytes_is_unsigned():
    assert compare_bytes(b"\xff", b"\x01", 1) > 0


def test_copy_bytes_copies_prefix():
    dest = bytearray(10)
    result = copy_bytes(dest, b"String\0", 7)
    assert result is dest
    assert _text(dest) == b"String"


def test_copy_bytes_rejects_short_source():
    with pytest.raises(ValueError):
        copy_bytes(bytearray(10), b"ab", 3)


def test_move_bytes_forward_overlap():
    buffer = bytearray(b"string\0\0\0\0")
    move_bytes(buffer, 2, 0, 7)
    assert _text(buffer) == b"ststring"


def test_move_bytes_backward_overlap():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_move_bytes_same_offset_unchanged():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 1, 1, 4)
    assert buffer == bytearray(b"abcdef")


def test_move_bytes_out_of_range():
    with pytest.raises(ValueError):
        move_bytes(bytearray(4), 2, 0, 3)


def test_copy_bounded_full():
    dest = bytearray(20)
    assert copy_bounded(dest, b"HelloWorld", 20) == len(b"HelloWorld")
    assert _text(dest) == b"HelloWorld"


def test_copy_bounded_truncates():
    dest = bytearray(5)
    assert copy_bounded(dest, b"ABCDEFGHIJ", 5) == 10
    assert _text(dest) == b"ABCD"


def test_copy_bounded_size_zero_writes_nothing():
    dest = bytearray(b"keep")
    assert copy_bounded(dest, b"Test", 0) == 4
    assert dest == bytearray(b"keep")


def test_concat_bounded_normal():
    dest = bytearray(50)
    dest[:5] = b"Hello"
    assert concat_bounded(dest, b"World", 50) == 10
    assert _text(dest) == b"HelloWorld"


def test_concat_bounded_size_smaller_than_dest():
    dest = bytearray(b"123\0\0\0\0\0\0\0")
    assert concat_bounded(dest, b"abc", 2) == 2 + 3
    assert _text(dest) == b"123"


def test_concat_bounded_size_equals_dest_length():
    dest = bytearray(b"123\0\0\0\0\0\0\0")
    assert concat_bounded(dest, b"abc", 3) == 3 + 3
    assert _text(dest) == b"123"


@pytest.mark.parametrize("size", [6, 7, 10])
def test_concat_bounded_room_enough(size):
    dest = bytearray(b"123\0\0\0\0\0\0\0")
    assert concat_bounded(dest, b"abc", size) == 6
    expected = b"123abc"[: size - 1]
    assert _text(dest) == expected


def test_concat_bounded_truncates_long_source():
    src = b"abcdefghijklmnopqrstuvwxyz"
    dest = bytearray(20)
    dest[:5] = b"12345"
    result = concat_bounded(dest, src, 10)
    assert result == 5 + len(src)
    assert _text(dest) == b"12345" + src[:4]
    assert len(_text(dest)) == 9


def test_concat_bounded_empty_parts():
    dest = bytearray(5)
    assert concat_bounded(dest, b"abc", 5) == 3
    assert _text(dest) == b"abc"
    other = bytearray(b"123\0\0")
    assert concat_bounded(other, b"", 5) == 3
    assert _text(other) == b"123"


def test_concat_bounded_rejects_size_beyond_buffer():
    with pytest.raises(ValueError):
        concat_bounded(bytearray(3), b"a", 4)