import sys

import pytest

from cubutils.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    realloc,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert buf == bytearray(b"zzz") + bytearray(b"def")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_length_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeros_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == bytearray(2) + bytearray(b"llo")


def test_bzero_zero_length_leaves_buffer():
    buf = bytearray(b"hello")
    bzero(buf, 0)
    assert buf == bytearray(b"hello")


def test_memcpy_copies_bytes():
    dest = bytearray(6)
    src = b"source"
    assert memcpy(dest, src, 6) is dest
    assert bytes(dest) == src


def test_memcpy_partial():
    dest = bytearray(b"xxxxxx")
    memcpy(dest, b"ab", 2)
    assert dest == bytearray(b"ab") + bytearray(b"xxxx")


def test_memcpy_negative_length():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"ab", -1)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    target = view[2:]
    result = memmove(target, view, 4)
    assert result is target
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result) == b"cdefef"
    assert buf == bytearray(b"cdefef")


def test_memmove_matches_memcpy_without_overlap():
    a = bytearray(5)
    b = bytearray(5)
    memmove(a, b"12345", 5)
    memcpy(b, b"12345", 5)
    assert a == b


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert index == data.index(b"n")


def test_memchr_respects_length():
    data = b"banana"
    assert memchr(data, ord("n"), data.index(b"n")) is None


def test_memchr_missing_byte():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"a", b"c", 1) == ord("a") - ord("c")


def test_memcmp_stops_at_length():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_calloc_is_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(sys.maxsize, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_realloc_grows_with_zero_fill():
    result = realloc(b"abc", 5)
    assert result == bytearray(b"abc") + bytearray(2)


def test_realloc_shrinks():
    result = realloc(bytearray(b"abcdef"), 3)
    assert result == bytearray(b"abc")


def test_realloc_from_none():
    result = realloc(None, 4)
    assert result == bytearray(4)


def test_realloc_zero_releases():
    assert realloc(b"abc", 0) is None


def test_realloc_returns_new_buffer():
    original = bytearray(b"abc")
    result = realloc(original, 3)
    result[0] = 0
    assert original == bytearray(b"abc")