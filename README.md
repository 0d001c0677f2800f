# pushswap

Works out a sequence of operations on two stacks, `a` and `b`, meant to sort
a list of distinct integers, and prints the operations one per line.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the two top elements of `a`                |
| `sb`  | swap the two top elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom comes to the top    |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An operation that cannot change its stack (a swap or rotation of a stack with
fewer than two elements, a push from an empty stack) is still reported.

## Installing

    pip install .

## Command line

    push-swap 3 2 1
    push-swap "5 4 3 2 1"

The same entry point can be run as `python -m pushswap.cli`.

Numbers may be given as separate arguments or several to one argument,
separated by spaces; the first number is the top of stack `a`. With no
arguments nothing is printed and the exit status is 0. A token that is not a
plain decimal integer (optional sign, digits only), a number outside the
32-bit signed range, an empty argument or a repeated number makes the
program write `Error` to standard error and exit with status 1. An argument
made only of spaces adds no numbers.

Input that is already in ascending order, or has at most one number,
produces no output. Two or three numbers are sorted directly; four or five
by first moving the smallest one or two to `b`. Longer inputs are handled by
`pushswap.turk.turk_sort`: all but three numbers are pushed to `b`, the
three left in `a` are sorted, and each value of `b` is then moved back at the
position with the lowest rotation cost.

## From Python

```python
from pushswap.cli import solve
from pushswap.parser import parse_args

values = parse_args(["3 1 2"])
moves = solve(values)
print([str(op) for op in moves])   # ['ra']
```

- `pushswap.parser.parse_args(args)` returns the list of integers, or raises
  `pushswap.parser.ParseError` (a `ValueError`) for input the command line
  rejects; `parse_int(token)` parses a single token.
- `pushswap.cli.solve(values)` returns the list of `pushswap.moves.Operation`
  members; `dispatch(stacks)` runs the size-dependent sort on a `Stacks`.
- `pushswap.moves.Stacks(values, emit)` holds stacks `a` and `b` and has one
  method per operation (`sa`, `pb`, `rrr`, ...). Each operation is passed to
  `emit`; by default it is written to standard output.
- `pushswap.stack.Stack` is the doubly linked stack, with `push_top`,
  `push_bottom`, `pop_top`, `pop_bottom`, `clear` and `is_sorted`.
- `pushswap.small_sort` has `sort3`, `sort4` and `sort5`.
- `pushswap.debug.check_integrity(stack, label)` returns True for a
  well-formed stack and raises `IntegrityError` otherwise.
- `pushswap.textutils` holds small helpers: ASCII character tests
  (`chars`), C-style integer conversion (`convert`), byte buffer routines
  (`memory`), C-style string routines (`strings`), stream output (`output`)
  and a minimal `printf` / `format_string` (`printf`).

## Limitations

- Only up to five numbers are reliably left sorted. For longer inputs the
  final rotation brings to the top the element lying directly above the
  smallest value rather than the smallest value itself, and the insertion
  step places values relative to the largest element of `a`; the printed
  sequence need not sort the input, and `find_position` raises `LookupError`
  when the value it looks for is on top of `a`.
- There is no program that reads a list of operations and checks whether
  they sort a given input.

## Tests

    pip install .[test]
    pytest