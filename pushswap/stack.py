"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import pairwise
from typing import Optional, TextIO

from .output import put_line


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank, 0 for the smallest.

    Equal values receive consecutive ranks in the order they appear.
    """
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for rank, index in enumerate(order):
        ranks[index] = rank
    return ranks


class Stack:
    """A named stack whose top is its first element."""

    def __init__(self, name: str, values: Iterable[int] = ()) -> None:
        self.name = name
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {list(self._items)!r})"

    def top(self) -> int:
        """The element on top of the stack."""
        if not self._items:
            raise IndexError(f"stack {self.name} is empty")
        return self._items[0]

    def push(self, value: int) -> None:
        """Put value on top of the stack."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the element on top of the stack."""
        if not self._items:
            raise IndexError(f"stack {self.name} is empty")
        return self._items.popleft()

    def swap(self) -> None:
        """Exchange the two top elements; fewer than two leaves the stack alone."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._items.rotate(1)

    def is_sorted(self) -> bool:
        """True when the elements never decrease from top to bottom."""
        return all(upper <= lower for upper, lower in pairwise(self._items))


class Board:
    """Stacks a and b holding the ranks of the input, and a log of operations.

    Every operation applied is written, one per line, to the stream
    (standard output when none is given) and kept in ``operations``.
    """

    _COMBINED = {"rr": ("ra", "rb"), "rrr": ("rra", "rrb")}

    def __init__(self, values: Iterable[int], stream: Optional[TextIO] = None) -> None:
        self.a = Stack("a", compress(list(values)))
        self.b = Stack("b")
        self.stacks = {"a": self.a, "b": self.b}
        self.stream = stream
        self.operations: list[str] = []
        self._actions: dict[str, Callable[[], None]] = {
            "sa": self.a.swap,
            "sb": self.b.swap,
            "pa": lambda: self.a.push(self.b.pop()),
            "pb": lambda: self.b.push(self.a.pop()),
            "ra": self.a.rotate,
            "rb": self.b.rotate,
            "rra": self.a.reverse_rotate,
            "rrb": self.b.reverse_rotate,
        }

    def apply(self, op: str) -> None:
        """Perform op and record it.

        "rr" and "rrr" act on both stacks and are recorded as the two
        single-stack operations they consist of.
        """
        parts = self._COMBINED.get(op)
        if parts is not None:
            for part in parts:
                self.apply(part)
            return
        action = self._actions.get(op)
        if action is None:
            raise ValueError(f"unknown operation {op!r}")
        action()
        self.operations.append(op)
        put_line(op, self.stream)