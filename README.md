# miniprintf

A small `printf`-style formatter and a set of helpers for characters,
strings, byte buffers, singly linked lists and writing to text streams.

## Installation

```
pip install miniprintf
```

For development, with the test dependencies:

```
pip install -e ".[test]"
pytest
```

## Formatting

The `miniprintf.printf` module holds the formatter.

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, stream=None)` writes the formatted text to `stream`
  (standard output by default) and returns the number of characters written.

```python
from miniprintf.printf import printf, sprintf

sprintf("%s has %d items (%x)", "cart", 42, 255)   # 'cart has 42 items (ff)'
sprintf("%p", 0)                                   # '(nil)'
sprintf("%s", None)                                # '(null)'
count = printf("%c%c\n", "o", "k")                 # prints "ok", returns 3
```

Supported conversions:

| Spec      | Meaning                                                   |
|-----------|-----------------------------------------------------------|
| `%c`      | one character; an integer is narrowed to its low byte     |
| `%s`      | a string; `None` gives `(null)`                           |
| `%p`      | an address as `0x` and lower-case hex; `0`/`None` is `(nil)` |
| `%d` `%i` | a decimal, taken as a signed 32-bit integer               |
| `%u`      | a decimal, taken as an unsigned 32-bit integer            |
| `%x` `%X` | unsigned 32-bit hex, lower or upper case                  |
| `%%`      | a literal percent sign                                    |

There are no flags, widths or precisions. An unknown conversion produces
nothing and takes no argument; a lone `%` at the end of the format is
ignored; extra arguments are ignored. Too few arguments raise `TypeError`.
A NUL character in the format ends it.

The converters behind each specification can be called directly:
`format_char`, `format_string`, `format_address`, `format_decimal`,
`format_unsigned` and `format_hex(n, spec)` with `spec` of `"x"` or `"X"`.

## Helpers

Throughout the string helpers, a NUL character ends a string and anything
after it is ignored.

- `miniprintf.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. Each takes an integer code or a
  one-character string; the case converters return the same kind.
- `miniprintf.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` on `bytearray`/`memoryview` buffers (sources may also be
  `bytes`), and `calloc(count, size)` returning a zero-filled `bytearray`.
  Lengths beyond a buffer raise `ValueError`.
- `miniprintf.search`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `atoi`, `itoa`. Searches return an index
  or `None`; `strlcpy` and `strlcat` return `(text, length)` pairs. `atoi`
  wraps to a signed 32-bit range; `itoa` raises `OverflowError` outside it.
- `miniprintf.text`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`.
- `miniprintf.linked`: `Node` and `LinkedList`, which supports `len()`,
  iteration, `push_front`, `push_back`, `last`, `pop_front`, `clear`,
  `iterate` and `map`. `pop_front`, `clear` and `map` accept an optional
  `delete` callback for removed contents.
- `miniprintf.fdout`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to any text stream (standard output by default).

```python
from miniprintf.text import split
from miniprintf.search import atoi
from miniprintf.linked import LinkedList

split("  a b  c ", " ")        # ['a', 'b', 'c']
atoi("   -42abc")              # -42
items = LinkedList([1, 2, 3])
list(items.map(lambda x: x * 10, None))   # [10, 20, 30]
```

## What it does not do

The package is a library only: it installs no command-line program.