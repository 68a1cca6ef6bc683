"""Byte-buffer operations on bytearrays, memoryviews and bytes."""

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of value."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src into the start of dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src into dest; the two may be overlapping views."""
    _check_length(n, dest, src)
    if n:
        # Taking a snapshot first makes overlapping views safe.
        dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of value among the first n, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare n bytes; the difference of the first unequal pair, or 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if size > sys.maxsize // count:
        raise OverflowError(f"{count} elements of {size} bytes is too large")
    return bytearray(count * size)