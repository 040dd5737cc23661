"""Whole-string transformations: trimming, splitting and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

__all__ = ["strtrim", "split", "striteri", "strmapi"]

_NUL = "\0"
_TERMINATORS = (_NUL, 0)


def _separator(sep: Union[int, str]) -> str:
    """Return ``sep`` as a one-character string."""
    if isinstance(sep, bool):
        raise TypeError("separator must be an int or a one-character str, got bool")
    if isinstance(sep, int):
        return chr(sep & 0xFF)
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {sep!r}")
        return sep
    raise TypeError(
        f"separator must be an int or a one-character str, got {type(sep).__name__}"
    )


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` that is in ``charset``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim needs two strings")
    return s.strip(charset)


def split(s: Optional[str], sep: Union[int, str]) -> Optional[List[str]]:
    """Split ``s`` on runs of ``sep``, dropping empty pieces.

    ``None`` gives ``None`` and an empty string gives an empty list. With
    the NUL character as separator the whole string is the only piece.
    """
    if s is None:
        return None
    separator = _separator(sep)
    if not s:
        return []
    if separator == _NUL:
        return [s]
    return [word for word in s.split(separator) if word]


def striteri(buffer: MutableSequence, f: Callable[[int, MutableSequence], None]) -> None:
    """Call ``f(index, buffer)`` for each element up to the first NUL.

    ``buffer`` is a mutable sequence of characters (a list of one-character
    strings or a ``bytearray``); ``f`` may change the element at ``index``.
    """
    for index, item in enumerate(buffer):
        if item in _TERMINATORS:
            break
        f(index, buffer)


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    Returns ``None`` when either argument is ``None``.
    """
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))