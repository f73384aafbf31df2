"""Byte buffer operations with C library semantics."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` as a byte."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first that differ."""
    _check_count(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_count(n, len(dst), len(src))
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf``; overlapping regions are handled."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dst_offset, len(buf) - src_offset)
    buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf