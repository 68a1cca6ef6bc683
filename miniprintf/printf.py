"""A small formatter for %c, %s, %p, %d, %i, %u, %x, %X and %%."""

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

from miniprintf.search import itoa, strdup

_UINT_MASK = 0xFFFFFFFF
_INT_MIN = -(2**31)


def _wrap_int(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def format_char(c: Union[int, str]) -> str:
    """One character; an integer is narrowed to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def format_string(s: Optional[str]) -> str:
    """s up to its terminator, or "(null)" for None."""
    if s is None:
        return "(null)"
    return strdup(s)


def format_address(address: Optional[int]) -> str:
    """An address as 0x followed by lower-case hex, or "(nil)" for None or 0."""
    if not address:
        return "(nil)"
    if address < 0:
        raise ValueError(f"address must not be negative, got {address}")
    return f"0x{address:x}"


def format_decimal(n: int) -> str:
    """Signed decimal text of n taken as a 32-bit signed integer."""
    return itoa(_wrap_int(n))


def format_unsigned(n: int) -> str:
    """Decimal text of n taken as a 32-bit unsigned integer."""
    return str(n & _UINT_MASK)


def format_hex(n: int, spec: str) -> str:
    """Hex text of n taken as a 32-bit unsigned integer; spec "x" or "X" sets the case."""
    if spec == "x":
        return f"{n & _UINT_MASK:x}"
    if spec == "X":
        return f"{n & _UINT_MASK:X}"
    raise ValueError(f"hex conversion must be 'x' or 'X', got {spec!r}")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_address,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, "x"),
    "X": lambda n: format_hex(n, "X"),
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """The text that fmt produces with args.

    An unknown conversion produces nothing and takes no argument; a lone
    trailing % is ignored. Extra arguments are ignored.
    """
    values = iter(args)
    chars = iter(strdup(fmt))
    parts = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERSIONS:
            parts.append(_CONVERSIONS[spec](_next_arg(values, spec)))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default); returns its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)