"""Byte-buffer helpers: fill, copy, search, compare and resize."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (truncated to a byte)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if all match."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the product would not fit in the address space.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > sys.maxsize // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)


def realloc(buf: Optional[ReadableBuffer], new_size: int) -> Optional[bytearray]:
    """A new zero-filled buffer of ``new_size`` bytes holding the start of ``buf``.

    A size of zero releases the buffer and gives None.
    """
    if new_size < 0:
        raise ValueError(f"size must not be negative, got {new_size}")
    if new_size == 0:
        return None
    result = bytearray(new_size)
    if buf is not None:
        keep = min(len(buf), new_size)
        result[:keep] = buf[:keep]
    return result