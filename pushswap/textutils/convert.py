"""Integer to text conversions with 32-bit C integer semantics."""

from __future__ import annotations

_INT_BITS = 32
_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring any trailing junk.

    Leading whitespace is skipped and one optional sign is read. Text with no
    digits yields 0. The result wraps to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    magnitude = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * magnitude)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)