"""Byte-buffer helpers: fill, copy, search, compare and zeroed allocation."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_SIZE_LIMIT = 1 << 64


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"count {count} exceeds buffer length {len(buf)}")


def memset(buffer: Buffer, value: int, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (low 8 bits) and return it."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: Buffer, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: Optional[Buffer], src: Optional[ReadableBuffer], count: int) -> Optional[Buffer]:
    """Copy ``count`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both are ``None`` nothing is copied and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(dest: Optional[Buffer], src: Optional[ReadableBuffer], count: int) -> Optional[Buffer]:
    """Copy ``count`` bytes from ``src`` to ``dest``, correct even when they overlap."""
    if dest is None and src is None:
        return None
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memchr(data: ReadableBuffer, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (low 8 bits) within ``count`` bytes, or ``None``."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, count: int) -> int:
    """Difference of the first unequal bytes within ``count`` bytes, or 0 when they match."""
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A zero count or size gives a one-byte buffer. A total that would not fit
    in a 64-bit size raises ``OverflowError``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    total = count * size
    if total >= _SIZE_LIMIT:
        raise OverflowError("requested allocation size overflows")
    return bytearray(total)