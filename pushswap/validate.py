"""Turning command-line arguments into validated integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from .conversions import atoi, split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""


def split_arguments(argv: Iterable[str]) -> list[str]:
    """Tokens of the arguments; an argument holding spaces gives its words."""
    tokens: list[str] = []
    for argument in argv:
        if " " in argument:
            tokens.extend(split(argument, " "))
        else:
            tokens.append(argument)
    return tokens


def check_number(text: str) -> None:
    """Raise InputError unless text is an optional sign followed by digits only.

    A sign must be followed by at least one digit; the empty string passes.
    """
    body = text[1:] if text.startswith(("+", "-")) else text
    if body is not text and not body:
        raise InputError(f"sign without digits: {text!r}")
    if not _DIGITS.issuperset(body):
        raise InputError(f"not a number: {text!r}")


def check_range(text: str) -> None:
    """Raise InputError if text is empty or lies outside the 32-bit signed range."""
    if not text:
        raise InputError("empty argument")
    try:
        value = int(text)
    except ValueError:
        raise InputError(f"not a number: {text!r}") from None
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")


def check_duplicates(tokens: Sequence[str]) -> list[int]:
    """Return the integer values of tokens, raising InputError if any repeat."""
    values = [atoi(token) for token in tokens]
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value {value}")
        seen.add(value)
    return values


def is_ascending(values: Iterable[int]) -> bool:
    """True when the values never decrease."""
    return all(left <= right for left, right in pairwise(values))


def validate(tokens: Sequence[str]) -> list[int]:
    """Check every token and return their integer values."""
    for token in tokens:
        check_number(token)
        check_range(token)
    return check_duplicates(tokens)