"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

from pushswap.libft.charclass import isdigit

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

# Space and the codes 7 to 13 are skipped before the number.
_LEADING = frozenset(" ") | frozenset(chr(code) for code in range(7, 14))


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Read a leading decimal integer, as C's atoi does.

    Leading blanks are skipped, one sign is allowed, and reading stops at
    the first non-digit. A text with no digits gives zero. The result wraps
    around like a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _LEADING:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not isdigit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap32(sign * result)


def itoa(n: int) -> str:
    """Write a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)