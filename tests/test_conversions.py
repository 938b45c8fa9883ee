import pytest

from pushswap.conversions import atoi, itoa, split


@pytest.mark.parametrize("number", [0, 7, -7, 123456, -98765, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("  +42") == 42


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == 123
    assert atoi("77 88") == 77


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("-") == atoi("")
    assert atoi("+-5") == atoi("")
    assert atoi("abc") == atoi("")


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_atoi_huge_values_saturate_then_truncate():
    assert atoi("9" * 25) == -1
    assert atoi("-" + "9" * 25) == atoi("")


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"


@pytest.mark.parametrize("number", [2**31, -(2**31) - 1, 2**40])
def test_itoa_rejects_out_of_range(number):
    with pytest.raises(OverflowError):
        itoa(number)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("     ", " ") == []


@pytest.mark.parametrize("text", ["a b c", "  one   two ", "single", "x  y  z  "])
def test_split_rejoins_to_normalised_text(text):
    words = split(text, " ")
    assert " ".join(words) == " ".join(text.split())
    assert all(word and " " not in word for word in words)


def test_split_other_separator():
    assert split(",1,,2,3,", ",") == ["1", "2", "3"]


def test_split_nul_separator_reads_up_to_terminator():
    assert split("abc\0def", "\0") == ["abc"]


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")