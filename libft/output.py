"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO, Union

from .integers import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd", "putnbr"]


def _char(c: Union[int, str]) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def putchar_fd(c: Union[int, str], stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer to ``stream``."""
    stream.write(itoa(n))


def putnbr(n: int) -> None:
    """Write the decimal text of a 32-bit signed integer to standard output."""
    putnbr_fd(n, sys.stdout)