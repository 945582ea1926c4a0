"""String helpers: searching, slicing, joining, trimming, splitting, comparing.

Positions are returned as indices into the string, or ``None`` where
nothing is found. The functions that fill a buffer take a mutable sequence
(a list of characters or a ``bytearray``) that holds the text without any
terminator. Their ``size`` is the room for the text plus a terminator.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Sequence

_NUL = "\0"


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``len(s)`` when ``c`` is NUL."""
    if c == _NUL:
        return len(s)
    position = s.find(c)
    return None if position < 0 else position


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``len(s)`` when ``c`` is NUL."""
    if c == _NUL:
        return len(s)
    position = s.rfind(c)
    return None if position < 0 else position


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    position = haystack[: max(length, 0)].find(needle)
    return None if position < 0 else position


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> List[str]:
    """The non-empty words of ``s`` between occurrences of the character ``sep``."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    buffer: MutableSequence, func: Callable[[int, object], Optional[object]]
) -> None:
    """Call ``func(index, item)`` on each item of ``buffer`` in place.

    A value returned by ``func`` replaces the item; ``None`` leaves it as is.
    """
    for index, item in enumerate(list(buffer)):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement


def _code(item: object) -> int:
    return item if isinstance(item, int) else ord(item)  # type: ignore[arg-type]


def strncmp(s1: Sequence, s2: Sequence, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells which sorts first.

    Comparison stops at the end of the shorter string, which counts as a
    character of code zero.
    """
    for position in range(max(n, 0)):
        left = _code(s1[position]) if position < len(s1) else 0
        right = _code(s2[position]) if position < len(s2) else 0
        if left != right:
            return left - right
        if left == 0:
            return 0
    return 0


def strlcpy(dest: MutableSequence, src: Sequence, size: int) -> int:
    """Replace ``dest`` with as much of ``src`` as fits in ``size``.

    Nothing changes when ``size`` is zero. Returns ``len(src)``.
    """
    if size > 0:
        dest[:] = src[: size - 1]
    return len(src)


def strlcat(dest: MutableSequence, src: Sequence, size: int) -> int:
    """Append as much of ``src`` to ``dest`` as fits in ``size``.

    Returns the length the full concatenation would have; when ``dest``
    already fills ``size``, it is left alone and ``size + len(src)`` comes back.
    """
    dest_len = len(dest)
    if dest_len >= size:
        return size + len(src)
    dest[dest_len:] = src[: size - 1 - dest_len]
    return dest_len + len(src)