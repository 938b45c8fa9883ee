"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_FORBIDDEN_IN_BASE = set("\t\n\v\f\r +-")
_UINT32_MASK = 2**32 - 1
_UINT64_MASK = 2**64 - 1


def _check_base(digits: str) -> None:
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if _FORBIDDEN_IN_BASE.intersection(digits):
        raise ValueError(f"base {digits!r} holds whitespace or a sign")
    if len(set(digits)) != len(digits):
        raise ValueError(f"base {digits!r} repeats a digit")


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def to_base(number: int, digits: str) -> str:
    """number written with the given digit alphabet, '-' prefixed if negative."""
    _check_base(digits)
    base = len(digits)
    remaining = abs(number)
    out = []
    while True:
        remaining, digit = divmod(remaining, base)
        out.append(digits[digit])
        if remaining == 0:
            break
    sign = "-" if number < 0 else ""
    return sign + "".join(reversed(out))


def format_number(number: int, spec: str) -> str:
    """Render number as the conversion spec would.

    'd' and 'i' read a signed 32-bit value, 'u', 'x' and 'X' an unsigned
    32-bit value, and 'p' an unsigned 64-bit value shown as 0x-prefixed hex.
    """
    if spec in ("d", "i"):
        return to_base(_int32(number), DECIMAL)
    if spec == "u":
        return to_base(number & _UINT32_MASK, DECIMAL)
    if spec == "x":
        return to_base(number & _UINT32_MASK, HEX_LOWER)
    if spec == "X":
        return to_base(number & _UINT32_MASK, HEX_UPPER)
    if spec == "p":
        return "0x" + to_base(number & _UINT64_MASK, HEX_LOWER)
    raise ValueError(f"unknown numeric conversion {spec!r}")


def _next_argument(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        value = _next_argument(values)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(int(value) & 0xFF)
    if spec == "s":
        value = _next_argument(values)
        return "(null)" if value is None else str(value).partition("\0")[0]
    if spec in "pdiuxX":
        return format_number(int(_next_argument(values)), spec)
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """The text that printing fmt with args produces.

    An unknown conversion produces nothing and consumes no argument.
    """
    values = iter(args)
    chars = iter(fmt.partition("\0")[0])
    parts = []
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default); return its length."""
    if fmt is None:
        return 0
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)