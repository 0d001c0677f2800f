"""Parsing of push_swap command-line arguments into integers."""

from __future__ import annotations

from typing import Iterable

from pushswap.textutils.chars import is_digit
from pushswap.textutils.strings import split

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


class ParseError(ValueError):
    """Raised for a malformed, out-of-range or duplicate argument."""


def parse_int(token: str) -> int:
    """Parse a strict decimal int: optional sign, digits only, 32-bit range."""
    sign = 1
    digits = token
    if digits[:1] in ("+", "-"):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    if not digits:
        raise ParseError(f"not a number: {token!r}")
    if not all(is_digit(ch) for ch in digits):
        raise ParseError(f"not a number: {token!r}")
    value = sign * int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"out of range: {token!r}")
    return value


def parse_args(args: Iterable[str]) -> list[int]:
    """Parse each argument as space-separated integers, in order.

    An empty argument, a malformed number or a repeated value raises
    ParseError. An argument made only of spaces adds nothing.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if not arg:
            raise ParseError("empty argument")
        for token in split(arg, " "):
            value = parse_int(token)
            if value in seen:
                raise ParseError(f"duplicate value: {value}")
            seen.add(value)
            values.append(value)
    return values