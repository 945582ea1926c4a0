"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from typing import Iterable, List, Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\f\v\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """The arguments are not a valid list of distinct integers."""


class AlreadySortedError(Exception):
    """The numbers are already in ascending order; nothing to do."""


def parse_int(text: str) -> int:
    """Read a signed integer that must lie strictly inside the int range.

    Leading whitespace and one sign are allowed; every other character
    must be a decimal digit. A text with no digits reads as zero.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            raise InputError(f"not a number: {text!r}")
        result = result * 10 + _DIGITS.index(ch)
        signed = sign * result
        if signed >= INT_MAX or signed <= INT_MIN:
            raise InputError(f"out of range: {text!r}")
    return sign * result


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn the program arguments into the list of numbers to sort.

    A single argument is split on spaces and must hold at least two
    numbers; several arguments are read one number each.
    """
    args = list(args)
    if len(args) == 1:
        words = [word for word in args[0].split(" ") if word]
        if not words:
            raise InputError("no numbers given")
        if len(words) == 1:
            raise InputError("a single quoted argument must hold several numbers")
        return [parse_int(word) for word in words]
    return [parse_int(arg) for arg in args]


def check_values(values: Iterable[int]) -> List[int]:
    """Reject duplicates and already sorted input; return the values."""
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError("duplicate numbers")
    if all(left <= right for left, right in zip(values, values[1:])):
        raise AlreadySortedError("numbers already sorted")
    return values