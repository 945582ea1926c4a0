"""Byte-buffer helpers: filling, searching, comparing and copying.

Buffers are ``bytearray`` objects (or any mutable sequence of byte
values). Counts that reach past the end of a buffer raise ``IndexError``
instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import MutableSequence, Optional, Sequence

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: Sequence) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: MutableSequence, c: int, n: int) -> MutableSequence:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: MutableSequence, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError("requested size does not fit in size_t")
    return bytearray(count * size)


def memchr(buffer: Sequence, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    _check_count(n, buffer)
    target = c & 0xFF
    return next(
        (position for position, byte in enumerate(buffer[:n]) if byte == target),
        None,
    )


def memcmp(b1: Sequence, b2: Sequence, n: int) -> int:
    """Compare the first ``n`` bytes; the result is the first difference, or 0."""
    _check_count(n, b1, b2)
    for left, right in zip(b1[:n], b2[:n]):
        if left != right:
            return (left & 0xFF) - (right & 0xFF)
    return 0


def memcpy(dest: MutableSequence, src: Sequence, n: int) -> MutableSequence:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: MutableSequence, dest: int, src: int, n: int) -> MutableSequence:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and count must not be negative")
    if src + n > len(buffer) or dest + n > len(buffer):
        raise IndexError("region reaches past the end of the buffer")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer