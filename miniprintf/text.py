"""Building new strings from old ones: slicing, joining, trimming, splitting, mapping.

As elsewhere in the package, a NUL character ends a string and what follows
it is ignored.
"""

from itertools import count
from typing import Callable, List, MutableSequence, Union

from miniprintf.search import strdup


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _separator(sep: Union[int, str]) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    if isinstance(sep, int) and not isinstance(sep, bool):
        return chr(sep & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(sep).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start past the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    text = strdup(s)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    text = strdup(s)
    chars = strdup(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: Union[int, str]) -> List[str]:
    """The non-empty words of s separated by runs of sep."""
    text = strdup(s)
    return [word for word in text.split(_separator(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, character) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(strdup(s)))


def striteri(chars: MutableSequence, func: Callable[[int, MutableSequence], None]) -> None:
    """Call func(index, chars) for each position of chars, in order.

    func may change chars in place. Iteration stops at the end of the
    sequence or at a NUL element, which is checked afresh at each step.
    """
    for index in count():
        if index >= len(chars) or chars[index] in ("\0", 0):
            return
        func(index, chars)