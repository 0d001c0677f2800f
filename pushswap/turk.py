"""Insertion-by-cheapest-move sort for stacks of more than five values."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable

from pushswap.moves import Stacks
from pushswap.parser import INT_MAX
from pushswap.small_sort import sort3, sort5
from pushswap.stack import Stack


def _rotation_cost(pos: int, size: int) -> int:
    return pos if pos <= size // 2 else size - pos


def _rotate(size: int, pos: int, forward: Callable[[], None],
            backward: Callable[[], None]) -> None:
    if pos <= size // 2:
        for _ in range(pos):
            forward()
    else:
        for _ in range(size - pos):
            backward()


def rotate_to_position_a(stacks: Stacks, pos: int) -> None:
    """Bring position ``pos`` of a to the top by the shorter direction."""
    _rotate(len(stacks.a), pos, stacks.ra, stacks.rra)


def rotate_to_position_b(stacks: Stacks, pos: int) -> None:
    """Bring position ``pos`` of b to the top by the shorter direction."""
    _rotate(len(stacks.b), pos, stacks.rb, stacks.rrb)


def find_position(stack: Stack, value: int) -> int:
    """Index of the element lying directly above ``value``.

    Returns -1 for an empty stack. Raises LookupError when ``value`` is on
    top or not in the stack, since no element lies above it.
    """
    if len(stack) == 0:
        return -1
    for pos, (_, below) in enumerate(pairwise(stack)):
        if below == value:
            return pos
    raise LookupError(f"no element lies above {value}")


def find_min_value(stack: Stack) -> int:
    """Smallest value, or 0 for an empty stack."""
    return min(stack, default=0)


def find_max_value(stack: Stack) -> int:
    """Largest value, or 0 for an empty stack."""
    return max(stack, default=0)


def find_bigger_target(a: Stack, b_value: int) -> int:
    """Position in a of the smallest value above ``b_value``; 0 if none."""
    target_pos = 0
    min_bigger = INT_MAX
    for pos, value in enumerate(a):
        if b_value < value < min_bigger:
            min_bigger = value
            target_pos = pos
    return target_pos


def find_target_pos_in_a(a: Stack, b_value: int) -> int:
    """Position in a that ``b_value`` should be pushed above."""
    if len(a) == 0:
        return 0
    target_pos = find_bigger_target(a, b_value)
    if target_pos != 0:
        return target_pos
    max_pos = find_position(a, find_max_value(a))
    return (max_pos + 1) % len(a)


def get_b_value_at_index(b: Stack, index: int) -> int:
    """Value at ``index`` in b, or INT_MAX past the end."""
    for i, value in enumerate(b):
        if i >= index:
            return value
    return INT_MAX


def calculate_cost(a: Stack, b: Stack, b_index: int) -> int:
    """Rotations needed to move b[b_index] and its target in a to the tops."""
    b_value = get_b_value_at_index(b, b_index)
    if b_value == INT_MAX:
        return INT_MAX
    target_pos_a = find_target_pos_in_a(a, b_value)
    return _rotation_cost(b_index, len(b)) + _rotation_cost(target_pos_a, len(a))


def find_cheapest_index(a: Stack, b: Stack) -> int:
    """Index in b of the first value with the lowest cost."""
    cheapest_cost = INT_MAX
    cheapest_index = 0
    for i in range(len(b)):
        cost = calculate_cost(a, b, i)
        if cost < cheapest_cost:
            cheapest_cost = cost
            cheapest_index = i
    return cheapest_index


def push_cheapest_to_a(stacks: Stacks) -> None:
    """Move the cheapest value of b onto its target position in a."""
    index = find_cheapest_index(stacks.a, stacks.b)
    b_value = get_b_value_at_index(stacks.b, index)
    target_pos = find_target_pos_in_a(stacks.a, b_value)
    rotate_to_position_b(stacks, index)
    rotate_to_position_a(stacks, target_pos)
    stacks.pa()


def push_initial_to_b(stacks: Stacks) -> None:
    """Push all but three values to b and sort the three left in a."""
    if len(stacks.a) <= 5:
        return
    for _ in range(len(stacks.a) - 3):
        if len(stacks.a) <= 3:
            break
        stacks.pb()
    sort3(stacks)


def turk_sort(stacks: Stacks) -> None:
    """Sort a; small stacks go to the dedicated small sorts."""
    if len(stacks.a) <= 5:
        if len(stacks.a) <= 3:
            sort3(stacks)
        else:
            sort5(stacks)
        return
    push_initial_to_b(stacks)
    while len(stacks.b) > 0:
        push_cheapest_to_a(stacks)
    min_pos = find_position(stacks.a, find_min_value(stacks.a))
    rotate_to_position_a(stacks, min_pos)