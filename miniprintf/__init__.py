"""A small printf-style formatter with character, string, buffer, list and stream-output helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "search", "text", "linked", "fdout", "printf"]