"""The eleven push_swap operations on a pair of stacks."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Iterable, Optional

from pushswap.stack import Stack


class Operation(Enum):
    """A named push_swap instruction."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"
    PA = "pa"
    PB = "pb"

    def __str__(self) -> str:
        return self.value


Emitter = Callable[[Operation], None]


def _print_operation(op: Operation) -> None:
    sys.stdout.write(f"{op.value}\n")


def _swap(stack: Stack) -> None:
    if len(stack) <= 1:
        return
    first = stack.pop_top()
    second = stack.pop_top()
    stack.push_top(first)
    stack.push_top(second)


def _rotate(stack: Stack) -> None:
    if len(stack) <= 1:
        return
    stack.push_bottom(stack.pop_top())


def _reverse_rotate(stack: Stack) -> None:
    if len(stack) <= 1:
        return
    stack.push_top(stack.pop_bottom())


def _push(source: Stack, target: Stack) -> None:
    if len(source) == 0:
        return
    target.push_top(source.pop_top())


class Stacks:
    """Stacks ``a`` and ``b``; every operation is reported to ``emit``.

    By default each operation is written to standard output on its own line.
    An operation is reported even when it leaves the stacks unchanged.
    """

    def __init__(self, values: Iterable[int] = (), emit: Optional[Emitter] = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self._emit: Emitter = emit if emit is not None else _print_operation

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap(self.a)
        self._emit(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap(self.b)
        self._emit(Operation.SB)

    def ss(self) -> None:
        """sa and sb at once."""
        _swap(self.a)
        _swap(self.b)
        self._emit(Operation.SS)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)
        self._emit(Operation.RA)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)
        self._emit(Operation.RB)

    def rr(self) -> None:
        """ra and rb at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._emit(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)
        self._emit(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)
        self._emit(Operation.RRB)

    def rrr(self) -> None:
        """rra and rrb at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit(Operation.RRR)

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.b, self.a)
        self._emit(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.a, self.b)
        self._emit(Operation.PB)