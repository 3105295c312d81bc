"""Bounded string search, comparison and copying.

Searches give an index into the string, or None when nothing is found.
The copying helpers return new strings. Functions that report how long a
result would have been return a ``Bounded`` pair.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import NamedTuple, Optional, Union

Char = Union[str, int]


class Bounded(NamedTuple):
    """A size-limited string result and the length it would have had without the limit."""

    value: str
    wanted: int


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character gives the end of the string.
    """
    code = _code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character gives the end of the string.
    """
    code = _code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Gives 0 when they match, otherwise the code difference of the first
    differing characters, the end of a string counting as code 0.
    """
    _check_size("n", n)
    pairs = zip_longest(map(ord, s1), map(ord, s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b or a == 0:
            return a - b
    return 0


def strnrcmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters from the ends of two strings.

    Gives 0 when ``s1`` ends with the last ``n`` characters of ``s2``
    (or with all of it when shorter). Gives 1 when ``s2`` is longer than
    ``s1`` or ``n`` is zero, otherwise the code difference of the first
    differing characters counted from the end.
    """
    _check_size("n", n)
    if len(s2) > len(s1) or n == 0:
        return 1
    for a, b in islice(zip(reversed(s1), reversed(s2)), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Bounded:
    """Copy ``src`` into a destination of ``size`` slots, one of them kept for the terminator."""
    _check_size("size", size)
    if size == 0:
        return Bounded("", len(src))
    return Bounded(src[: size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> Bounded:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    When ``size`` does not exceed the length of ``dst`` nothing is appended
    and the reported length is ``size`` plus the length of ``src``.
    """
    _check_size("size", size)
    if size <= len(dst):
        return Bounded(dst, size + len(src))
    room = size - 1 - len(dst)
    return Bounded(dst + src[:room], len(dst) + len(src))


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: the start of ``src``, padded with NUL characters."""
    _check_size("n", n)
    return src[:n].ljust(n, "\0")


def strndup(s: str, n: int) -> str:
    """A copy of at most the first ``n`` characters of ``s``."""
    _check_size("n", n)
    return s[:n]