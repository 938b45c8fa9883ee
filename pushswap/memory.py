"""Byte-buffer helpers working on bytes and bytearray objects.

Functions that modify memory do so in place on a bytearray. String helpers
treat a zero byte as the end of a string, the way a NUL-terminated buffer
is read.
"""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(buffer: Bytes, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buffer):
        raise ValueError(f"{what} holds {len(buffer)} bytes, {n} requested")


def _c_length(data: Bytes) -> int:
    """Length up to the first zero byte, or the whole buffer if there is none."""
    position = bytes(data).find(0)
    return len(data) if position < 0 else position


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with value (taken modulo 256)."""
    _check_span(buffer, n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    A request for zero bytes yields a single zero byte. A product that
    overflows a 64-bit size raises MemoryError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    if SIZE_MAX // size < count:
        raise MemoryError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(count * size)


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_span(data, n, "data")
    position = bytes(data[:n]).find(value & 0xFF)
    return None if position < 0 else position


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, else 0."""
    _check_span(first, n, "first")
    _check_span(second, n, "second")
    return next(
        (a - b for a, b in zip(first[:n], second[:n]) if a != b),
        0,
    )


def memcpy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy n bytes from src to the start of dst and return dst."""
    if n == 0:
        return dst
    _check_span(src, n, "source")
    _check_span(dst, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from src_offset to dst_offset, overlap-safe."""
    if min(dst_offset, src_offset, n) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dst_offset, src_offset) + n > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def strlcpy(dst: bytearray, src: Bytes, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the terminator.

    Returns the length of src, so a result >= size signals truncation.
    """
    src_len = _c_length(src)
    if size == 0:
        return src_len
    copied = min(src_len, size - 1)
    if copied + 1 > len(dst):
        raise ValueError("destination too small for the copy")
    dst[:copied + 1] = bytes(src[:copied]) + b"\0"
    return src_len


def strlcat(dst: bytearray, src: Bytes, size: int) -> int:
    """Append src to the string in dst, keeping the whole within size bytes.

    Returns the length the full concatenation would have had; when size does
    not exceed the current string in dst, returns size plus the length of src.
    """
    src_len = _c_length(src)
    dst_len = _c_length(dst)
    if size <= dst_len:
        return size + src_len
    copied = min(src_len, size - 1 - dst_len)
    end = dst_len + copied
    if end + 1 > len(dst):
        raise ValueError("destination too small for the concatenation")
    dst[dst_len:end + 1] = bytes(src[:copied]) + b"\0"
    return dst_len + src_len