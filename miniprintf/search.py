"""Length, search, comparison, copying and number conversion of strings.

Strings are read the way a terminated character string is read: a NUL
character, where present, ends the string and what follows it is ignored.
Positions are given back as indices into the string, with None for no match.
"""

import re
from typing import Optional, Tuple, Union

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _terminated(s: str) -> str:
    """The part of s before its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _as_char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        # An integer is narrowed to its low byte, as a char conversion would.
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _wrap_int(value: int) -> int:
    """Reduce value to the range of a 32-bit signed integer."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def strlen(s: str) -> int:
    """Number of characters before the first NUL, or the whole length."""
    return len(_terminated(s))


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first occurrence of c; searching for NUL finds the end."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last occurrence of c; searching for NUL finds the end."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Gives the difference of the codes of the first unequal pair, where the
    end of a string counts as code 0, or 0 when the strings agree.
    """
    _check_size(n, "n")
    a = _terminated(s1)
    b = _terminated(s2)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first occurrence of little lying wholly within big[:length].

    An empty little is found at index 0.
    """
    _check_size(length, "length")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a destination of size characters, terminator included.

    Returns the text that fits (at most size - 1 characters; nothing when
    size is 0) and the full length of src, so truncation shows as a length
    not smaller than size.
    """
    _check_size(size, "size")
    text = _terminated(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a destination of size characters.

    Returns the resulting text and the length it tried to create. When dest
    already fills size, it is left as it is and size + len(src) is returned.
    """
    _check_size(size, "size")
    head = _terminated(dest)
    tail = _terminated(src)
    dlen, slen = len(head), len(tail)
    if dlen >= size:
        return head, size + slen
    if slen < size - dlen:
        return head + tail, dlen + slen
    return head + tail[: size - dlen - 1], dlen + slen


def strdup(s: str) -> str:
    """A copy of s up to its terminator."""
    return _terminated(s)


def atoi(text: str) -> int:
    """Parse a decimal integer after leading white space and one optional sign.

    Parsing stops at the first non-digit; no digits gives 0. The result wraps
    to the range of a 32-bit signed integer.
    """
    match = _ATOI_PATTERN.match(_terminated(text))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return _wrap_int(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)