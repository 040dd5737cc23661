"""Line-by-line reading from streams with a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Generic, Iterator, List, Optional, Union

__all__ = ["LineReader", "read_file", "BUFFER_SIZE"]

BUFFER_SIZE = 4096
_MAX_BUFFER_SIZE = 0x7FFFFFFF


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline comes back without one. When the stream is
    exhausted, ``next_line`` returns ``None``.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if not 0 < buffer_size < _MAX_BUFFER_SIZE:
            raise ValueError(
                f"buffer size must be between 1 and {_MAX_BUFFER_SIZE - 1}, "
                f"got {buffer_size}"
            )
        self._stream = stream
        self._buffer_size = buffer_size
        self._store: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None
        self._exhausted = False

    def _fill(self) -> None:
        """Read until the store holds a newline or the stream ends."""
        while not self._exhausted:
            if (
                self._store is not None
                and self._newline is not None
                and self._newline in self._store
            ):
                return
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._store = None
                self._exhausted = True
                raise
            if not chunk:
                self._exhausted = True
                return
            if self._newline is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
            self._store = chunk if self._store is None else self._store + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` when nothing is left."""
        self._fill()
        store = self._store
        if not store or self._newline is None:
            self._store = None
            return None
        index = store.find(self._newline)
        if index < 0:
            self._store = None
            return store
        line, rest = store[: index + 1], store[index + 1:]
        self._store = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_file(path: Union[str, "os.PathLike[str]"]) -> List[str]:
    """Return every line of the text file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))