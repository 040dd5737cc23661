"""Integer parsing, formatting and swapping with 32-bit integer semantics."""

from __future__ import annotations

from typing import Tuple, TypeVar

__all__ = ["atoi", "itoa", "swap"]

INT_MIN = -2147483648
INT_MAX = 2147483647
LONG_MAX = 9223372036854775807

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")

T = TypeVar("T")
U = TypeVar("U")


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one sign is allowed. Parsing stops at
    the first non-digit; no digits give 0. A positive value beyond the
    64-bit maximum gives -1. The result is reduced to a 32-bit signed int.
    """
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < length and text[i] in _DIGITS:
        value = value * 10 + int(text[i])
        if sign == 1 and value > LONG_MAX:
            return -1
        i += 1
    return _wrap32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)


def swap(a: T, b: U) -> Tuple[U, T]:
    """Return the two values in the opposite order."""
    return b, a