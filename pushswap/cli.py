"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import io
import sys
from collections.abc import Sequence
from typing import Optional

from .output import put_line
from .sorting import sort
from .stack import Board
from .validate import InputError, split_arguments, validate


def solve(argv: Sequence[str]) -> list[str]:
    """The operations that sort the integers given in argv.

    Arguments holding spaces are split into several numbers. Raises
    InputError for malformed, out-of-range or repeated numbers.
    """
    values = validate(split_arguments(argv))
    board = Board(values, stream=io.StringIO())
    sort(board)
    return list(board.operations)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        operations = solve(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in operations:
        put_line(op, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())