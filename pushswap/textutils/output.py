"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))