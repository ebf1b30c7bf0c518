"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for size in sizes:
        if n > size:
            raise ValueError(f"byte count {n} exceeds buffer size {size}")


def fill(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buffer to value (taken modulo 256); return buffer."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    fill(buffer, 0, n)


def copy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def copy_until(dest: bytearray, src: bytes, c: int, n: int) -> Optional[int]:
    """Copy bytes from src to dest, stopping after the first byte equal to c.

    At most n bytes are copied. Returns the offset in dest just past the copied
    stop byte, or None when it was not among the first n bytes.
    """
    _check_count(n, len(dest), len(src))
    stop = src.find(bytes([c & 0xFF]), 0, n)
    count = n if stop < 0 else stop + 1
    dest[:count] = src[:count]
    return None if stop < 0 else count


def move(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def find_byte(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c in data[:n], or None."""
    _check_count(n, len(data))
    index = data.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def compare(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned values.

    Returns 0 when they are equal, otherwise the difference of the first pair
    of bytes that differ.
    """
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0