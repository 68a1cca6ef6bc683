"""Writing characters, strings and numbers to a text stream."""

import sys
from typing import Optional, TextIO, Union

from miniprintf.search import itoa, strdup


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer is narrowed to its low byte."""
    _target(stream).write(_as_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write s up to its terminator."""
    _target(stream).write(strdup(s))


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write s up to its terminator, then a newline."""
    out = _target(stream)
    out.write(strdup(s))
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _target(stream).write(itoa(n))