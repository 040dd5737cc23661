"""String inspection, copying, searching and joining.

Searches that would hand back a position inside a string return the
remainder of the string from that position, or ``None`` when nothing is
found. A character to look for may be a one-character string or an integer
code; an integer is reduced to its low 8 bits.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Sequence, Tuple, Union

__all__ = [
    "strlen",
    "arrlen",
    "strdup",
    "strndup",
    "strlcpy",
    "strlcat",
    "strchr",
    "strchr_index",
    "strrchr",
    "strnstr",
    "strncmp",
    "substr",
    "strjoin",
]

Char = Union[int, str]

_NUL = "\0"


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_count(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strlen(s: Optional[str]) -> int:
    """Return the length of ``s``; ``None`` counts as empty."""
    return 0 if s is None else len(s)


def arrlen(items: Optional[Sequence]) -> int:
    """Return the number of items; ``None`` counts as empty."""
    return 0 if items is None else len(items)


def strdup(s: Optional[str]) -> Optional[str]:
    """Return a copy of ``s``, or ``None`` for ``None``."""
    if s is None:
        return None
    return "".join(s)


def strndup(s: Optional[str], n: int) -> Optional[str]:
    """Return at most the first ``n`` characters of ``s``, or ``None`` for ``None``."""
    if s is None:
        return None
    _check_count(n, "length")
    return s[:n]


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which shows whether the copy was truncated.
    """
    _check_count(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: Optional[str], src: str, size: int) -> Tuple[Optional[str], int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length that was attempted. When
    ``size`` is not larger than ``dest``, ``dest`` is unchanged and the
    second value is ``len(src) + size``.
    """
    _check_count(size, "size")
    if dest is None:
        if size == 0:
            return None, len(src)
        raise TypeError("strlcat needs a destination when size is not zero")
    dlen = len(dest)
    slen = len(src)
    if size <= dlen:
        return dest, slen + size
    return dest + src[: size - dlen - 1], dlen + slen


def strchr(s: str, c: Char) -> Optional[str]:
    """Return ``s`` from the first occurrence of ``c``, or ``None``.

    Searching for the NUL character gives the empty end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        index = s.find(ch)
        return s[index:] if index >= 0 else ""
    index = s.find(ch)
    return s[index:] if index >= 0 else None


def strchr_index(s: str, c: Char) -> int:
    """Return the index of the first occurrence of ``c`` in ``s``, or -1."""
    return s.find(_char(c))


def strrchr(s: str, c: Char) -> str:
    """Return ``s`` from the last occurrence of ``c``.

    Searching for the NUL character gives the empty end of the string.
    When ``c`` does not occur, the whole of ``s`` is returned.
    """
    ch = _char(c)
    if ch == _NUL:
        return ""
    index = s.rfind(ch)
    return s[index:] if index >= 0 else s


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` lying wholly in the first ``length`` characters of ``haystack``.

    Returns ``haystack`` from the match, all of it for an empty needle, or
    ``None`` when there is no match.
    """
    _check_count(length, "length")
    if not needle:
        return haystack
    index = haystack[:length].find(needle)
    return haystack[index:] if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, a shorter
    string comparing as if followed by NUL, or 0 when they agree.
    """
    _check_count(n, "count")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a == _NUL and b == _NUL:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start beyond the end gives an empty string; ``None`` gives ``None``.
    """
    if s is None:
        return None
    _check_count(start, "start")
    _check_count(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a ``None`` side is left out, both ``None`` gives ``None``."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return strdup(s2)
    if s2 is None:
        return strdup(s1)
    return s1 + s2