# libft

A set of small helpers for characters, byte buffers, strings, integers,
stream output, formatted writing, line-by-line reading and singly linked
lists. It uses only the standard library.

## Modules

- **`libft.chars`**: ASCII classification and case conversion: `isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`. Each
  takes an integer code or a one-character string; the `is*` functions
  return a bool, and `tolower`/`toupper` return the same kind of value they
  were given.
- **`libft.memory`**: operations on mutable byte buffers such as
  `bytearray`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc`. `memmove(buffer, dest, src, n)` moves bytes between two offsets
  of one buffer, overlapping or not. `memchr` returns an index or `None`.
  A negative count raises `ValueError`; a span past the end of a buffer
  raises `IndexError`.
- **`libft.integers`**: `atoi`, `itoa`, `swap`. `atoi` skips leading
  whitespace, accepts one sign, stops at the first non-digit and reduces the
  result to a 32-bit signed integer; a positive value beyond the 64-bit
  maximum gives `-1`. `itoa` raises `OverflowError` for values outside the
  32-bit signed range. `swap(a, b)` returns `(b, a)`.
- **`libft.strings`**: `strlen`, `arrlen`, `strdup`, `strndup`, `strlcpy`,
  `strlcat`, `strchr`, `strchr_index`, `strrchr`, `strnstr`, `strncmp`,
  `substr`, `strjoin`. Searches return the rest of the string from the
  match, or `None` when there is none (`strrchr` returns the whole string
  instead). `strlcpy(src, size)` and `strlcat(dest, src, size)` return a
  tuple of the resulting text and the attempted length.
- **`libft.transform`**: `strtrim`, `split`, `striteri`, `strmapi`. `split`
  drops empty pieces; `striteri` calls `f(index, buffer)` on a mutable
  sequence up to its first NUL.
- **`libft.output`**: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  write to any text stream; `putnbr` writes to standard output.
- **`libft.printfd`**: `printfd(stream, fmt, *args)` writes formatted text
  and returns the number of characters written. It understands
  `%c %s %d %i %u %x %X %p %%`; numbers are taken as 32-bit values, `%s`
  of `None` prints `(null)` and `%p` of `None` or `0` prints `(nil)`. The
  pieces are also available on their own: `format_signed`,
  `format_unsigned`, `format_hex`, `format_pointer` and `convert`.
- **`libft.lines`**: `LineReader(stream, buffer_size)` reads a text or
  binary stream in chunks and yields lines with their newlines kept;
  `next_line()` returns `None` at the end. `read_file(path)` returns every
  line of a UTF-8 text file as a list.
- **`libft.linkedlist`**: `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `len()`, iteration, `for_each`, `map` and
  `clear`, plus `delete_one(node, delete)`. `clear` and `map` take an
  optional callback that receives each content being discarded.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import io
import sys

from libft.integers import atoi, itoa
from libft.transform import split, strtrim
from libft.printfd import printfd
from libft.lines import LineReader
from libft.linkedlist import LinkedList

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"

split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"

count = printfd(sys.stdout, "%s has %d items (%x)\n", "box", 255, 255)

for line in LineReader(io.StringIO("one\ntwo\n"), 4096):
    print(line, end="")

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)                  # [0, 2, 4, 6]
```

## What it does not do

This is a library only: it installs no command-line program. `printfd`
supports no field widths, precisions or flags, only the directives listed
above.