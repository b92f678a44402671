import pytest

from fizzgrid.memory import (
    allocate_zeroed,
    compare,
    copy,
    fill,
    find_byte,
    move,
    zero,
)


def test_zero_prefix_only():
    buf = bytearray(b"Burger")
    result = zero(buf, 3)
    assert result is buf
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"ger"


def test_zero_nothing():
    buf = bytearray(b"abc")
    zero(buf, 0)
    assert buf == b"abc"


def test_allocate_zeroed_size_and_content():
    buf = allocate_zeroed(4, 3)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


def test_allocate_zeroed_rejects_negative():
    with pytest.raises(ValueError):
        allocate_zeroed(-1, 4)


def test_find_byte_first_occurrence():
    data = b"hello"
    assert find_byte(data, ord("l"), len(data)) == data.index(b"l")


def test_find_byte_limited_by_n():
    data = b"hello"
    assert find_byte(data, ord("o"), 4) is None
    assert find_byte(data, ord("o"), 5) == 4


def test_find_byte_masks_value():
    data = bytes([1, 2, 255])
    assert find_byte(data, -1, 3) == 2


def test_compare_equal_and_sign():
    assert compare(b"abc", b"abc", 3) == 0
    assert compare(b"abc", b"abd", 3) < 0
    assert compare(b"abd", b"abc", 3) > 0


def test_compare_unsigned_and_antisymmetric():
    a, b = bytes([200]), bytes([1])
    assert compare(a, b, 1) == 199
    assert compare(a, b, 1) == -compare(b, a, 1)


def test_compare_ignores_past_n():
    assert compare(b"abX", b"abY", 2) == 0


def test_copy_prefix():
    dst = bytearray(b"xxxxx")
    result = copy(dst, b"abc", 3)
    assert result is dst
    assert dst == b"abcxx"


def test_copy_both_none():
    assert copy(None, None, 3) is None


def test_copy_one_none_raises():
    with pytest.raises(ValueError):
        copy(bytearray(3), None, 1)


def test_copy_too_long_raises():
    with pytest.raises(ValueError):
        copy(bytearray(2), b"abc", 3)


def test_move_overlap_forward():
    buf = bytearray(b"Hello World")
    move(buf, 3, 0, 8)
    assert buf == b"HelHello Wo"


def test_move_overlap_backward():
    buf = bytearray(b"Hello World")
    original = bytes(buf)
    move(buf, 0, 3, 8)
    assert buf[:8] == original[3:11]
    assert buf[8:] == original[8:]


def test_move_out_of_range():
    with pytest.raises(ValueError):
        move(bytearray(5), 3, 0, 4)


def test_fill_sets_prefix():
    buf = bytearray(6)
    fill(buf, ord("z"), 4)
    assert buf[:4] == b"zzzz"
    assert buf[4:] == bytes(2)


def test_fill_masks_value():
    buf = bytearray(2)
    fill(buf, 256 + 7, 2)
    assert list(buf) == [7, 7]


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        fill(bytearray(3), 0, -1)