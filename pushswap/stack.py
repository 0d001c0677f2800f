"""A doubly linked stack of integers with a top and a bottom end."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a stack, linked to its neighbours."""

    value: int
    prev: Optional[Node] = field(default=None, repr=False)
    next: Optional[Node] = field(default=None, repr=False)


class Stack:
    """A double-ended stack; iteration runs from the top to the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.top: Optional[Node] = None
        self.bottom: Optional[Node] = None
        self.size = 0
        for value in values:
            self.push_bottom(value)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        node = self.top
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def push_top(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        node = Node(value)
        if self.size == 0:
            self.top = self.bottom = node
        else:
            assert self.top is not None
            node.next = self.top
            self.top.prev = node
            self.top = node
        self.size += 1

    def push_bottom(self, value: int) -> None:
        """Place ``value`` under the bottom of the stack."""
        node = Node(value)
        if self.size == 0:
            self.top = self.bottom = node
        else:
            assert self.bottom is not None
            node.prev = self.bottom
            self.bottom.next = node
            self.bottom = node
        self.size += 1

    def pop_top(self) -> int:
        """Remove and return the top value; IndexError when empty."""
        if self.size == 0:
            raise IndexError("pop from an empty stack")
        node = self.top
        assert node is not None
        if self.size == 1:
            self.top = self.bottom = None
        else:
            self.top = node.next
            assert self.top is not None
            self.top.prev = None
        self.size -= 1
        node.next = node.prev = None
        return node.value

    def pop_bottom(self) -> int:
        """Remove and return the bottom value; IndexError when empty."""
        if self.size == 0:
            raise IndexError("pop from an empty stack")
        node = self.bottom
        assert node is not None
        if self.size == 1:
            self.top = self.bottom = None
        else:
            self.bottom = node.prev
            assert self.bottom is not None
            self.bottom.next = None
        self.size -= 1
        node.next = node.prev = None
        return node.value

    def clear(self) -> None:
        """Drop every element."""
        self.top = None
        self.bottom = None
        self.size = 0

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        if self.size <= 1:
            return True
        return all(upper <= lower for upper, lower in pairwise(self))