"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _signed(value: Any) -> str:
    number = int(value) & _UINT_MASK
    if number & 0x80000000:
        number -= 1 << 32
    return str(number)


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "X")


def _char(value: Any) -> str:
    if isinstance(value, str):
        return value[0] if value else "\0"
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "p": _pointer,
    "x": _hex_lower,
    "X": _hex_upper,
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
}


def format_printf(fmt: Optional[str], *args: Any) -> str:
    """Expand ``fmt`` with ``args``; unknown conversions produce nothing."""
    if fmt is None:
        return ""
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            try:
                arg = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            pieces.append(_CONVERSIONS[spec](arg))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded format to ``stream`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)