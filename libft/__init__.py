"""Character, memory, string, integer, output, formatting, line-reading and linked-list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "integers",
    "strings",
    "transform",
    "output",
    "printfd",
    "lines",
    "linkedlist",
]