"""printf-style formatting and writing to text streams.

The format language is small: ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. A ``%`` followed by anything else is dropped, and
the character after it is output as ordinary text.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Optional, TextIO, Union

_UPPER_DIGITS = "0123456789ABCDEF"
_LOWER_DIGITS = "0123456789abcdef"
_INT_MIN = -(2**31)
_UINT_MASK = 0xFFFFFFFF


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def itoa_base(num: int, base: int) -> str:
    """Digits of the unsigned ``num`` in ``abs(base)``.

    A negative base selects lower-case digits, a positive one upper-case.
    """
    if num < 0:
        raise ValueError(f"number must not be negative, got {num}")
    radix = abs(base)
    if not 2 <= radix <= 16:
        raise ValueError(f"base must be between 2 and 16 in magnitude, got {base}")
    digits = _LOWER_DIGITS if base < 0 else _UPPER_DIGITS
    if num == 0:
        return "0"
    out = []
    while num:
        num, rem = divmod(num, radix)
        out.append(digits[rem])
    return "".join(reversed(out))


def _char(arg: Union[str, int]) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    if isinstance(arg, int):
        return chr(arg & 0xFF)
    raise TypeError(f"%c expects a character or an integer, got {type(arg).__name__}")


def _string(arg: Optional[str]) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a string, got {type(arg).__name__}")
    return arg


def _pointer(arg: object) -> str:
    if arg is None or arg == 0:
        return "(nil)"
    address = arg if isinstance(arg, int) else id(arg)
    if address < 0:
        address &= 2**64 - 1
    return "0x" + itoa_base(address, -16)


def _integer(arg: int, spec: str) -> str:
    if not isinstance(arg, int):
        raise TypeError(f"%{spec} expects an integer, got {type(arg).__name__}")
    return str(_wrap_int32(arg))


def _unsigned(arg: int, spec: str) -> str:
    if not isinstance(arg, int):
        raise TypeError(f"%{spec} expects an integer, got {type(arg).__name__}")
    base = {"u": 10, "x": -16, "X": 16}[spec]
    return itoa_base(arg & _UINT_MASK, base)


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)

    def next_arg(spec: str) -> object:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "c":
            yield _char(next_arg(spec))
        elif spec == "s":
            yield _string(next_arg(spec))
        elif spec == "p":
            yield _pointer(next_arg(spec))
        elif spec in ("d", "i"):
            yield _integer(next_arg(spec), spec)
        elif spec in ("u", "x", "X"):
            yield _unsigned(next_arg(spec), spec)
        elif spec == "%":
            yield "%"
        else:
            # Unknown conversion: the '%' is dropped, the next character is plain text.
            yield spec


def format_string(fmt: str, *args: object) -> str:
    """Render ``fmt`` with ``args`` and return the result."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output; give the number of characters."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def eprintf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard error; give the number of characters."""
    text = format_string(fmt, *args)
    sys.stderr.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write one character; give 1."""
    _target(stream).write(_char(c))
    return 1


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string and give its length; None writes nothing and gives 0."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit integer."""
    _target(stream).write(str(_wrap_int32(n)))