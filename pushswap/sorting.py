"""Strategies that sort stack a of a Board using the puzzle's operations."""

from __future__ import annotations

from itertools import islice

from .stack import Board

SHORT_LIMIT = 6


def sort_three(board: Board, name: str) -> None:
    """Order the top three elements of stack ``name`` ascending from the top.

    The fewest operations for each of the six arrangements are used:
    a swap, a rotation, a reverse rotation, or a swap followed by one
    of the rotations.
    """
    stack = board.stacks[name]
    if len(stack) < 3:
        raise ValueError(f"stack {name} holds fewer than three elements")
    head, second, third = islice(stack, 3)
    swap, rotate, reverse = f"s{name}", f"r{name}", f"rr{name}"
    if second < head < third:
        board.apply(swap)
    elif head > second and second < third:
        board.apply(rotate)
    elif third < head < second:
        board.apply(reverse)
    elif head > second > third:
        board.apply(swap)
        board.apply(reverse)
    elif head < second and second > third:
        board.apply(swap)
        board.apply(rotate)


def _order_pair(board: Board, name: str, descending: bool) -> None:
    """Swap the top two elements of stack ``name`` if they are out of order."""
    stack = board.stacks[name]
    if len(stack) < 2:
        return
    first, second = islice(stack, 2)
    if (first < second) if descending else (first > second):
        board.apply(f"s{name}")


def _send_half_to_b(board: Board) -> None:
    size = len(board.a)
    pivot = size // 2
    while size // 2 > len(board.b):
        if board.a.top() < pivot:
            board.apply("pb")
        else:
            board.apply("ra")


def _send_to_a(board: Board) -> None:
    if len(board.b) <= 2:
        _order_pair(board, "b", descending=True)
    elif len(board.b) == 3:
        sort_three(board, "b")
    while len(board.b):
        board.apply("pa")


def _sort_a_then_merge(board: Board) -> None:
    if len(board.a) <= 2:
        _order_pair(board, "a", descending=False)
    elif len(board.a) == 3:
        sort_three(board, "a")
    _send_to_a(board)


def sort_short(board: Board) -> None:
    """Sort a stack a of at most five elements.

    Four or five elements are sorted by moving the smaller half to b,
    sorting what remains in a, and bringing b back on top.
    """
    size = len(board.a)
    if size >= SHORT_LIMIT:
        raise ValueError(f"{size} elements are too many for the short sort")
    if board.a.is_sorted():
        return
    if size > 3:
        _send_half_to_b(board)
        _sort_a_then_merge(board)
    elif size == 3:
        sort_three(board, "a")
    else:
        _order_pair(board, "a", descending=False)


def radix_sort(board: Board) -> None:
    """Sort stack a bit by bit on the ranks, lowest bit first.

    For each bit, elements with that bit clear go to b and the rest are
    rotated; then b is pushed back onto a.
    """
    shift = 0
    while not board.a.is_sorted():
        for _ in range(len(board.a)):
            if (board.a.top() >> shift) & 1 == 0:
                board.apply("pb")
            else:
                board.apply("ra")
        while len(board.b):
            board.apply("pa")
        shift += 1


def sort(board: Board) -> None:
    """Sort stack a, choosing the short sort for fewer than six elements."""
    if len(board.a) < SHORT_LIMIT:
        sort_short(board)
    else:
        radix_sort(board)