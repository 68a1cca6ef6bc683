import io

import pytest

from miniprintf.printf import (
    format_address,
    format_char,
    format_decimal,
    format_hex,
    format_string,
    format_unsigned,
    printf,
    sprintf,
)


def test_format_char_low_byte():
    assert format_char(65 + 256) == chr(65)


def test_format_char_string():
    assert format_char("q") == "q"


def test_format_string_none():
    assert format_string(None) == "(null)"


def test_format_string_terminated():
    assert format_string("ab\0cd") == "ab"


@pytest.mark.parametrize("address", [None, 0])
def test_format_address_nil(address):
    assert format_address(address) == "(nil)"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 2**48 + 17, 2**64 - 1])
def test_format_address_round_trip(address):
    text = format_address(address)
    assert text.startswith("0x")
    assert text == text.lower()
    assert int(text[2:], 16) == address


def test_format_address_negative():
    with pytest.raises(ValueError):
        format_address(-1)


def test_format_decimal_int_min():
    assert format_decimal(-2147483648) == "-2147483648"


def test_format_decimal_wraps():
    assert format_decimal(2**31) == "-2147483648"


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -123456])
def test_format_decimal_round_trip(n):
    assert int(format_decimal(n)) == n


@pytest.mark.parametrize("n", [0, 9, 4242, 2**31])
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_format_unsigned_negative_wraps():
    assert int(format_unsigned(-1)) == 0xFFFFFFFF


@pytest.mark.parametrize("n", [0, 10, 255, 0xABCDEF, 0xFFFFFFFF])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, "x"), 16) == n
    assert format_hex(n, "X") == format_hex(n, "x").upper()
    assert format_hex(n, "x") == format_hex(n, "x").lower()


def test_format_hex_negative_wraps():
    assert int(format_hex(-1, "x"), 16) == 0xFFFFFFFF


def test_format_hex_bad_spec():
    with pytest.raises(ValueError):
        format_hex(1, "o")


def test_sprintf_plain():
    assert sprintf("plain text") == "plain text"


def test_sprintf_percent():
    assert sprintf("%%") == "%"


def test_sprintf_mixed():
    assert sprintf("%s-%d", "ab", 42) == "ab-42"


def test_sprintf_matches_parts():
    result = sprintf("%c%s%p%i%u%x%X", "z", None, 0, -3, 7, 255, 255)
    expected = (
        format_char("z")
        + format_string(None)
        + format_address(0)
        + format_decimal(-3)
        + format_unsigned(7)
        + format_hex(255, "x")
        + format_hex(255, "X")
    )
    assert result == expected


def test_sprintf_unknown_spec_produces_nothing():
    assert sprintf("%q") == ""


def test_sprintf_unknown_spec_takes_no_argument():
    assert sprintf("%q%s", "word") == "word"


def test_sprintf_trailing_percent():
    assert sprintf("abc%") == "abc"


def test_sprintf_stops_at_nul():
    assert sprintf("ab\0cd") == "ab"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s=%u", "key", 12, stream=buf)
    assert buf.getvalue() == sprintf("%s=%u", "key", 12)
    assert count == len(buf.getvalue())


def test_printf_nul_char_counts_one():
    buf = io.StringIO()
    assert printf("%c", 0, stream=buf) == 1
    assert buf.getvalue() == chr(0)


def test_printf_default_stdout(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == len("(null)")