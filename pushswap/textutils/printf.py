"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %.

Integer conversions follow C argument types: ``d``/``i`` wrap to a 32-bit
signed int, ``u``/``x``/``X`` to a 32-bit unsigned int and ``p`` to a 64-bit
address. An unknown conversion prints nothing and consumes no argument; a
lone ``%`` at the end of the format is printed as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32 = (1 << 32) - 1
_UINT64 = (1 << 64) - 1


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return value


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _convert_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _UINT64
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _convert_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_int32(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT32)
    if spec == "x":
        return f"{_as_int(value, spec) & _UINT32:x}"
    if spec == "X":
        return f"{_as_int(value, spec) & _UINT32:X}"
    return _convert_pointer(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    pieces = []
    remaining = iter(args)
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "%" and i + 1 < len(fmt):
            pieces.append(_convert(fmt[i + 1], remaining))
            i += 2
        else:
            pieces.append(ch)
            i += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)