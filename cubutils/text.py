"""Parsing, formatting, splitting and trimming of text, and file-extension checks."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

from cubutils.strings import strnrcmp

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_SPACE = " \t\n\v\f\r"


class ExtensionError(ValueError):
    """Raised when a file name does not carry the required extension."""


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(s: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. A string without digits gives 0.
    If a digit follows once the positive value already exceeds the largest
    32-bit integer, the result is -1; otherwise the value wraps to 32 bits.
    """
    rest = s.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        if result * sign > _INT_MAX:
            return -1
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(n)


def split(s: str, sep: str) -> list[str]:
    """Words of ``s`` separated by the character ``sep``; empty words are dropped."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``.

    An empty ``charset`` leaves the string unchanged.
    """
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of two strings."""
    return s1 + s2


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, func: Callable[[int, object], Optional[object]]) -> None:
    """Call ``func(index, item)`` on each item of ``s`` in order.

    When ``func`` returns something other than None, it replaces the item in place.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def skip_prefix(program: Optional[str]) -> int:
    """Index just past the first '/' in ``program``, or 0 when there is none."""
    if not program:
        return 0
    slash = program.find("/")
    return 0 if slash < 0 else slash + 1


def check_extension(program: str, file: str, ext: str) -> None:
    """Raise ExtensionError unless ``file`` ends with ``ext``.

    The message names the program without its leading directory part.
    """
    if strnrcmp(file, ext, len(ext)):
        name = program[skip_prefix(program):] if program else ""
        raise ExtensionError(f"{name} only accepts {ext} files")