"""Byte-buffer operations on mutable buffers such as ``bytearray``.

Counts and offsets are checked: a negative count raises ``ValueError`` and
a span that runs past the end of a buffer raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]


def _check_span(buffer, start: int, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0:
        raise ValueError(f"offset must not be negative, got {start}")
    if start + n > len(buffer):
        raise IndexError(
            f"{what} of length {len(buffer)} has no {n} bytes at offset {start}"
        )


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_span(buffer, 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are ``None`` nothing is copied and ``None`` comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs two buffers")
    _check_span(src, 0, n, "source")
    _check_span(dest, 0, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    _check_span(buffer, src, n, "source region")
    _check_span(buffer, dest, n, "destination region")
    if dest != src and n:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first ``n`` bytes."""
    _check_span(buffer, 0, n)
    target = value & 0xFF
    return next((i for i, byte in enumerate(buffer[:n]) if byte == target), None)


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_span(a, 0, n, "first buffer")
    _check_span(b, 0, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)