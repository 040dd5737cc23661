"""Character classification and case conversion for ASCII characters.

Each function takes either an integer code or a one-character string.
The classification functions return a bool. The case functions return a
value of the same kind as their argument.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

__all__ = [
    "isalnum",
    "isalpha",
    "isascii",
    "isdigit",
    "isprint",
    "tolower",
    "toupper",
]


def _code(ch: Char) -> int:
    """Return the integer code of ``ch``."""
    if isinstance(ch, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(ch, int):
        return ch
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    raise TypeError(f"expected an int or a one-character str, got {type(ch).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(ch: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(ch)
    return _is_lower(code) or _is_upper(code)


def isdigit(ch: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(ch) <= ord("9")


def isalnum(ch: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(ch) or isdigit(ch)


def isascii(ch: Char) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(ch) <= 127


def isprint(ch: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(ch) <= 126


def _convert(ch: Char, code: int) -> Char:
    return chr(code) if isinstance(ch, str) else code


def tolower(ch: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(ch)
    if _is_upper(code):
        return _convert(ch, code + 32)
    return ch


def toupper(ch: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(ch)
    if _is_lower(code):
        return _convert(ch, code - 32)
    return ch