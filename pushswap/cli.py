"""Command line entry: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.moves import Operation, Stacks
from pushswap.parser import ParseError, parse_args
from pushswap.small_sort import sort3, sort5
from pushswap.turk import turk_sort


def dispatch(stacks: Stacks) -> None:
    """Choose the sort for the size of stack a; sorted input is left alone."""
    a = stacks.a
    if len(a) <= 1 or a.is_sorted():
        return
    if len(a) <= 3:
        sort3(stacks)
    elif len(a) <= 5:
        sort5(stacks)
    else:
        turk_sort(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values``."""
    ops: list[Operation] = []
    dispatch(Stacks(values, emit=ops.append))
    return ops


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments and print one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    dispatch(Stacks(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())