"""Conversions between text and integers, and splitting text into words."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _terminated(text: str) -> str:
    return text.partition("\0")[0]


def _to_int32(value: int) -> int:
    """Reduce value to a signed 32-bit integer, wrapping around."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one sign is allowed. Parsing stops at
    the first non-digit. The result wraps to a 32-bit signed integer; a
    magnitude that would not fit a 64-bit signed integer gives -1 when
    positive and 0 when negative.
    """
    body = _terminated(text).lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for char in takewhile(lambda c: "0" <= c <= "9", body):
        digit = ord(char) - ord("0")
        if result > (_LONG_MAX - digit) // 10:
            return _to_int32(_LONG_MAX if sign == 1 else _LONG_MIN)
        result = result * 10 + digit
    return _to_int32(sign * result)


def itoa(number: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit a 32-bit signed integer")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """The non-empty words of text separated by the character sep."""
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    body = _terminated(text)
    if sep == "\0":
        return [body] if body else []
    return [word for word in body.split(sep) if word]