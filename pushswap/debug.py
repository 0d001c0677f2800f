"""Structural checks for a linked stack."""

from __future__ import annotations

from typing import Optional

from pushswap.stack import Stack


class IntegrityError(Exception):
    """Raised when a stack's links or size are inconsistent."""

    def __init__(self, reason: str, label: str = "") -> None:
        self.reason = reason
        self.label = label
        prefix = f"{label}: " if label else ""
        super().__init__(f"{prefix}Integrity: {reason}")


def _count_nodes(stack: Stack) -> int:
    # Stop one past the recorded size so a cycle cannot loop forever.
    limit = stack.size + 1
    count = 0
    node = stack.top
    while node is not None and count < limit:
        count += 1
        node = node.next
    return count


def _links_agree(stack: Stack) -> bool:
    previous = None
    node = stack.top
    while node is not None:
        if node.prev is not previous:
            return False
        previous = node
        node = node.next
    return True


def check_integrity(stack: Optional[Stack], label: str = "") -> bool:
    """Return True for a well-formed stack; raise IntegrityError otherwise."""
    if stack is None:
        raise IntegrityError("no stack", label)
    if stack.size == 0 and (stack.top is not None or stack.bottom is not None):
        raise IntegrityError("empty mismatch", label)
    if stack.size > 0 and (stack.top is None or stack.bottom is None):
        raise IntegrityError("null end", label)
    if stack.top is not None and stack.top.prev is not None:
        raise IntegrityError("top prev", label)
    if stack.bottom is not None and stack.bottom.next is not None:
        raise IntegrityError("bottom next", label)
    if _count_nodes(stack) != stack.size:
        raise IntegrityError("size mismatch", label)
    if not _links_agree(stack):
        raise IntegrityError("broken links", label)
    return True