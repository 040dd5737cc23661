"""A small formatted writer supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import operator
from functools import partial
from typing import Any, Callable, Dict, Iterator, Sequence, TextIO

__all__ = [
    "format_signed",
    "format_unsigned",
    "format_hex",
    "format_pointer",
    "convert",
    "printfd",
]

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_SIGN_BIT = 1 << 31
_MISSING = object()


def _unsigned32(n: int) -> int:
    return operator.index(n) & _UINT_MASK


def format_signed(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit signed int (wider values wrap)."""
    value = _unsigned32(n)
    if value >= _SIGN_BIT:
        value -= 1 << 32
    return str(value)


def format_unsigned(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit unsigned int."""
    return str(_unsigned32(n))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal text of ``n`` taken as a 32-bit unsigned int."""
    return format(_unsigned32(n), "X" if upper else "x")


def format_pointer(address: Any) -> str:
    """Text for a pointer: ``(nil)`` for null, otherwise ``0x`` and lower-case hex.

    An int is used as the address itself; any other object uses its ``id``.
    """
    if address is None:
        return "(nil)"
    if isinstance(address, int):
        value = operator.index(address) & _ULONG_MASK
    else:
        value = id(address)
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def _format_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"%c needs a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _format_str(s: Any) -> str:
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"%s needs a str, got {type(s).__name__}")
    return s


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": format_hex,
    "X": partial(format_hex, upper=True),
    "p": format_pointer,
}


def convert(spec: str, *args: Any) -> str:
    """Return the text for one directive ``spec`` applied to the first argument.

    ``%`` needs no argument; every other directive needs one. An unknown
    directive produces no text.
    """
    if spec == "%":
        return "%"
    if not args:
        raise TypeError(f"directive %{spec} needs an argument")
    handler = _CONVERSIONS.get(spec)
    return handler(args[0]) if handler else ""


def _render(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    chars = iter(fmt)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an unfinished directive")
        if spec == "%":
            yield "%"
            continue
        value = next(values, _MISSING)
        if value is _MISSING:
            raise TypeError("not enough arguments for format")
        yield convert(spec, value)


def printfd(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write ``fmt`` with its directives filled in to ``stream``.

    Returns the number of characters written. Extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a str")
    text = "".join(_render(fmt, args))
    stream.write(text)
    return len(text)