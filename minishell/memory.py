"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional

_SIZE_MAX = 2**64 - 1


def _check_length(name: str, data, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative, got {n}")
    if n > len(data):
        raise IndexError(f"{name}: length {n} exceeds buffer of {len(data)} bytes")


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first n bytes of buf to zero, in place."""
    return mem_set(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size > 0 and count > _SIZE_MAX // size:
        raise OverflowError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(count * size)


def mem_find(data, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value among the first n, or None."""
    _check_length("mem_find", data, n)
    target = value & 0xFF
    view = memoryview(data).cast("B")
    for index, byte in enumerate(view[:n]):
        if byte == target:
            return index
    return None


def mem_compare(a, b, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned values.

    Returns the difference of the first differing bytes, or 0 when they match.
    """
    if n == 0:
        return 0
    _check_length("mem_compare", a, n)
    _check_length("mem_compare", b, n)
    left = memoryview(a).cast("B")[:n]
    right = memoryview(b).cast("B")[:n]
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0


def mem_copy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first n bytes of src over the start of dest, in place."""
    _check_length("mem_copy", dest, n)
    _check_length("mem_copy", src, n)
    dest[:n] = bytes(memoryview(src).cast("B")[:n])
    return dest


def mem_move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dest; regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"mem_move: length must not be negative, got {n}")
    if dest + n > len(buf) or src + n > len(buf):
        raise IndexError("mem_move: range exceeds buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def mem_set(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (taken modulo 256), in place."""
    _check_length("mem_set", buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf