import io

import pytest

from teachos.printf import fprintf, xformat


def test_plain_text_passes_through():
    assert xformat("hello world") == "hello world"


def test_decimal_in_context():
    assert xformat("%d items", 42) == "42 items"


def test_negative_decimal():
    assert xformat("%d", -42) == "-42"


@pytest.mark.parametrize("n", [0, 1, 9, 10, 12345, -1, -99999, 2**31 - 1, -(2**31)])
def test_decimal_round_trip(n):
    assert int(xformat("%d", n)) == n


def test_decimal_wraps_to_32_bits():
    assert xformat("%d", 2**31) == "-2147483648"


def test_hex_upper_case():
    assert xformat("%x", 255) == "FF"


@pytest.mark.parametrize("n", [0, 1, 0xABC, 0x7FFFFFFF, -1, -16])
def test_hex_round_trip_is_unsigned_32(n):
    assert int(xformat("%x", n), 16) == n & 0xFFFFFFFF


@pytest.mark.parametrize("n", [0, 7, 2**32 + 5, 2**40])
def test_long_prints_low_32_bits_unsigned(n):
    assert int(xformat("%l", n)) == n & 0xFFFFFFFF


def test_pointer_padded():
    assert xformat("%p", 255) == "0x00000000000000FF"


@pytest.mark.parametrize("v", [0, 1, 0xDEADBEEF, 2**64 - 1])
def test_pointer_round_trip(v):
    s = xformat("%p", v)
    assert s.startswith("0x")
    assert len(s) == 18
    assert int(s[2:], 16) == v


def test_string_and_null():
    assert xformat("[%s]", "hello") == "[hello]"
    assert xformat("%s", None) == "(null)"


def test_char():
    assert xformat("%c%c", "z", ord("y")) == "zy"


def test_percent_literal():
    assert xformat("100%%") == "100%"


def test_unknown_conversion_echoed():
    assert xformat("%q") == "%q"


def test_trailing_percent_dropped():
    assert xformat("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(ValueError):
        xformat("%d %d", 1)


def test_fprintf_writes_to_stream():
    buf = io.StringIO()
    fprintf(buf, "%s=%d\n", "n", 3)
    assert buf.getvalue() == "n=3\n"