"""Sorting of stacks holding at most five values with few operations."""

from __future__ import annotations

from pushswap.moves import Stacks
from pushswap.stack import Stack


def _top_two(stack: Stack) -> tuple[int, int]:
    assert stack.top is not None and stack.top.next is not None
    return stack.top.value, stack.top.next.value


def _min_position(stack: Stack) -> int:
    values = list(stack)
    if not values:
        return -1
    return min(range(len(values)), key=values.__getitem__)


def _rotate_a_to_top(stacks: Stacks, pos: int) -> None:
    size = len(stacks.a)
    if not 0 <= pos < size:
        return
    if pos <= size // 2:
        for _ in range(pos):
            stacks.ra()
    else:
        for _ in range(size - pos):
            stacks.rra()


def _push_min_to_b(stacks: Stacks) -> None:
    _rotate_a_to_top(stacks, _min_position(stacks.a))
    stacks.pb()


def sort3(stacks: Stacks) -> None:
    """Sort stack a when it holds two or three values."""
    a = stacks.a
    if len(a) <= 1:
        return
    if len(a) == 2:
        top, mid = _top_two(a)
        if top > mid:
            stacks.sa()
        return
    top, mid = _top_two(a)
    assert a.bottom is not None
    bottom = a.bottom.value
    if top > mid and top > bottom:
        stacks.ra()
    elif mid > top and mid > bottom:
        stacks.rra()
    top, mid = _top_two(a)
    if top > mid:
        stacks.sa()


def sort4(stacks: Stacks) -> None:
    """Sort four values in a, parking the smallest on b meanwhile."""
    _push_min_to_b(stacks)
    sort3(stacks)
    stacks.pa()


def sort5(stacks: Stacks) -> None:
    """Sort up to five values in a, using b for the two smallest."""
    size = len(stacks.a)
    if size <= 3:
        sort3(stacks)
        return
    if size == 4:
        sort4(stacks)
        return
    _push_min_to_b(stacks)
    _push_min_to_b(stacks)
    sort3(stacks)
    b = stacks.b
    if len(b) == 2:
        top, second = _top_two(b)
        if top < second:
            stacks.sb()
    stacks.pa()
    stacks.pa()