import io

import pytest

from pushswap.formatting import format_number, format_string, printf, to_base


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, -255, 123456789, -(2**40)])
def test_to_base_hex_round_trip(number):
    assert int(to_base(number, "0123456789abcdef"), 16) == number


@pytest.mark.parametrize("number", [0, 1, 2, 5, -9, 1023])
def test_to_base_binary_round_trip(number):
    assert int(to_base(number, "01"), 2) == number


@pytest.mark.parametrize("number", [0, 42, -42, 2147483647])
def test_to_base_decimal_matches_str(number):
    assert to_base(number, "0123456789") == str(number)


@pytest.mark.parametrize("digits", ["", "0", "0+", "01-", "011", "0 1", "0\t1"])
def test_to_base_rejects_invalid_base(digits):
    with pytest.raises(ValueError):
        to_base(10, digits)


@pytest.mark.parametrize(
    "number, expected",
    [
        (2**64 - 1, "0xffffffffffffffff"),
        (-1, "0xffffffffffffffff"),
        (2**63 - 1, "0x7fffffffffffffff"),
        (-(2**63), "0x8000000000000000"),
    ],
)
def test_pointer_edges(number, expected):
    assert format_number(number, "p") == expected


@pytest.mark.parametrize("number", [0, 1, 4096, 2**48 + 7])
def test_pointer_round_trip(number):
    text = format_number(number, "p")
    assert text.startswith("0x")
    assert int(text[2:], 16) == number


def test_signed_conversion_wraps_to_32_bits():
    assert format_number(2**31, "d") == "-2147483648"
    assert format_number(2**31, "i") == format_number(2**31, "d")


def test_unsigned_conversion_of_negative():
    assert int(format_number(-1, "u")) == 2**32 - 1
    assert int(format_number(-1, "x"), 16) == 2**32 - 1


@pytest.mark.parametrize("number", [0, 10, 48879, -1, 2**31])
def test_upper_hex_is_upper_of_lower_hex(number):
    assert format_number(number, "X") == format_number(number, "x").upper()


def test_format_number_rejects_unknown_spec():
    with pytest.raises(ValueError):
        format_number(1, "q")


def test_format_string_null_string():
    assert format_string("%s", None) == "(null)"


def test_format_string_percent_and_chars():
    assert format_string("%%") == "%"
    assert format_string("%c%c", "h", ord("i")) == "hi"


def test_format_string_mixed_matches_parts():
    result = format_string("%s\n%d|%x", "pb", -7, 255)
    assert result == "pb\n" + format_number(-7, "d") + "|" + format_number(255, "x")


def test_format_string_unknown_conversion_consumes_nothing():
    assert format_string("%q%s", "ra") == "ra"


def test_format_string_lone_percent_raises():
    with pytest.raises(ValueError):
        format_string("abc%")


def test_format_string_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s\n", "sa", stream=stream)
    assert stream.getvalue() == "sa\n"
    assert count == len(stream.getvalue())


def test_printf_none_format_returns_zero():
    stream = io.StringIO()
    assert printf(None, stream=stream) == 0
    assert stream.getvalue() == ""


def test_printf_default_stdout(capsys):
    count = printf("%s %u\n", "rra", 3)
    out = capsys.readouterr().out
    assert out == format_string("%s %u\n", "rra", 3)
    assert count == len(out)