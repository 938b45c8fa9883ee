"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text up to its terminator; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text.partition("\0")[0])


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline; None writes nothing."""
    if text is None:
        return
    put_str(text, stream)
    put_char("\n", stream)


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(int(number)))