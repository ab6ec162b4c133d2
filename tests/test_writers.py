import pytest

from miniprintf.writers import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_unsigned,
)


def test_format_char_from_str():
    assert format_char("z") == "z"


def test_format_char_from_int():
    assert format_char(65) == chr(65)


def test_format_char_int_wraps_to_byte():
    assert format_char(256 + 66) == chr(66)


def test_format_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_format_char_rejects_non_integer():
    with pytest.raises(TypeError):
        format_char(1.5)


def test_format_str_plain():
    assert format_str("hello world") == "hello world"


def test_format_str_none():
    assert format_str(None) == "(null)"


def test_format_str_stops_at_nul():
    assert format_str("abc\0def") == "abc"


def test_format_str_rejects_non_string():
    with pytest.raises(TypeError):
        format_str(42)


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, 2**31 - 1, -(2**31)])
def test_format_int_matches_decimal(n):
    assert format_int(n) == "%d" % n


def test_format_int_wraps_overflow():
    assert format_int(2**31) == str(-(2**31))


def test_format_int_round_trip():
    for n in range(-300, 300, 7):
        assert int(format_int(n)) == n


@pytest.mark.parametrize("n", [0, 7, 10, 4294967295])
def test_format_unsigned_in_range(n):
    assert format_unsigned(n) == str(n)


def test_format_unsigned_negative_wraps():
    assert format_unsigned(-1) == str(2**32 - 1)


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 0xDEADBEEF, 2**64 - 1])
def test_format_hex_lower_and_upper(n):
    assert format_hex(n, False) == format(n, "x")
    assert format_hex(n, True) == format(n, "X")


def test_format_hex_round_trip():
    for n in (1, 4096, 123456789, 2**40 + 3):
        assert int(format_hex(n, False), 16) == n


def test_format_hex_wraps_negative_to_64_bits():
    assert format_hex(-1, False) == "f" * 16


def test_format_pointer_none():
    assert format_pointer(None) == "0x0"


def test_format_pointer_zero():
    assert format_pointer(0) == "0x0"


def test_format_pointer_address():
    address = 0x7FFEE4B2C8A0
    assert format_pointer(address) == "0x" + format(address, "x")