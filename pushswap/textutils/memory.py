"""Byte buffer operations on bytearray objects."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(name: str, length: int, available: int) -> None:
    if length < 0:
        raise ValueError(f"{name} must not be negative")
    if length > available:
        raise ValueError(f"{name} {length} exceeds buffer of {available} bytes")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (low byte)."""
    _check_length("length", length, len(buf))
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dst``."""
    _check_length("n", n, min(len(dst), len(src)))
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied out
    first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length("n", n, len(buf) - max(dst, src))
    if n and dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``data[:n]``."""
    _check_length("n", n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_length("n", n, min(len(a), len(b)))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A zero count or size gives a one-byte buffer. A product that does not fit
    in a machine size raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    if count == 0 or size == 0:
        return bytearray(1)
    return bytearray(count * size)