"""String helpers with the behaviour of the classic C string routines.

Positions are returned as indices into the string, or None where the C
routine would give a null pointer. Buffer-filling routines return the
resulting text together with the length the C routine reports.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    Returns None when ``c`` does not occur.
    """
    ch = _char(c)
    if ch == "\0" and "\0" not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL finds the terminator."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch, the
    end of a string counting as code 0, or 0 when the prefixes agree.
    """
    _check_size("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``; truncation has
    happened when that length is not less than ``size``.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the concatenation would have
    had with unlimited room. If ``dst`` already fills the buffer it is left
    unchanged and the reported length is ``size + len(src)``.
    """
    _check_size("size", size)
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    copy_len = min(size - dst_len - 1, len(src))
    return dst + src[:copy_len], dst_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, item)`` for each item of ``s``, in place.

    A return value other than None replaces the item at that index.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for i, item in enumerate(list(s)):
        replacement = func(i, item)
        if replacement is not None:
            s[i] = replacement