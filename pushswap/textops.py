"""String helpers that read text the way a NUL-terminated buffer is read.

A NUL character ("\\0") inside a string marks its end: everything after it
is ignored. Searches return indices rather than pointers, and None where
nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, TypeVar

T = TypeVar("T")


def _terminated(text: str) -> str:
    """The part of text before the first NUL character."""
    return text.partition("\0")[0]


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def strlen(text: str) -> int:
    """Number of characters before the first NUL, or the whole length."""
    return len(_terminated(text))


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first occurrence of char, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    char = _single(char)
    body = _terminated(text)
    if char == "\0":
        return len(body)
    position = body.find(char)
    return None if position < 0 else position


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last occurrence of char, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    char = _single(char)
    body = _terminated(text)
    if char == "\0":
        return len(body)
    position = body.rfind(char)
    return None if position < 0 else position


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the code points of the first unequal pair,
    with the end of a string counting as code point zero, or 0 when the
    compared prefixes are equal.
    """
    if n < 0:
        raise ValueError(f"negative length {n}")
    left = _terminated(first)[:n]
    right = _terminated(second)[:n]
    width = max(len(left), len(right))
    for a, b in zip(left.ljust(width, "\0"), right.ljust(width, "\0")):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of needle in the first n characters of haystack, or None.

    An empty needle is found at index 0. The whole needle must lie within
    the first n characters.
    """
    if n < 0:
        raise ValueError(f"negative length {n}")
    wanted = _terminated(needle)
    if not wanted:
        return 0
    if n == 0:
        return None
    position = _terminated(haystack)[:n].find(wanted)
    return None if position < 0 else position


def strdup(text: str) -> str:
    """A copy of the string up to its terminator."""
    return _terminated(text)


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start.

    A start at or past the end of the string, or a zero length, gives "".
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _terminated(text)
    if length == 0 or start >= len(body):
        return ""
    return body[start:start + length]


def strjoin(first: str, second: str) -> str:
    """The two strings joined end to end."""
    return _terminated(first) + _terminated(second)


def strtrim(text: str, chars: str) -> str:
    """text with every leading and trailing character found in chars removed."""
    return _terminated(text).strip(_terminated(chars))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from func(index, char) for each character."""
    return "".join(func(index, char) for index, char in enumerate(_terminated(text)))


def striteri(chars: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each element of chars in place with func(index, element)."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)