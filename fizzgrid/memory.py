"""Byte-buffer helpers: zeroing, filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for available in lengths:
        if n > available:
            raise ValueError(f"byte count {n} exceeds buffer length {available}")


def zero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None.

    ``value`` is reduced to an unsigned byte first.
    """
    _check_count(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def copy(dst: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("both source and destination are required")
    _check_count(n, len(dst), len(src))
    dst[:n] = src[:n]
    return dst


def move(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from offset ``src`` to ``dst``.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dst, len(buffer) - src)
    buffer[dst:dst + n] = buffer[src:src + n]
    return buffer


def fill(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` as an unsigned byte."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer