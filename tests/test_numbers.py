"""
Tests for offset/length number parsing.
"""

import pytest

from core.domain.notation import NumberBase
from core.errors import InvalidNumberError, NumberOverflowError, OutOfRangeError
from core.parsers.numbers import parse_byte, parse_literal, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", 123),
        ("0", 0),
        ("0123", 0o123),
        ("0x7B", 0x7B),
        ("0X7b", 0x7B),
        ("\\x7B", 0x7B),
        ("\\X7b", 0x7B),
        ("-5", -5),
        ("+7", 7),
        (" 42", 42),
    ],
)
def test_parse_number_notations(text, expected):
    """Decimal, octal and both hex prefixes resolve to the same integers."""
    assert parse_number(text) == expected


def test_parse_literal_keeps_base():
    assert parse_literal("123").base is NumberBase.DECIMAL
    assert parse_literal("0123").base is NumberBase.OCTAL
    assert parse_literal("\\x10").base is NumberBase.HEXADECIMAL
    assert parse_literal("\\x10").text == "\\x10"


@pytest.mark.parametrize("text", ["0x", "", "12a", "09", "0x1G", "1 ", "\\x"])
def test_parse_number_rejects_garbage(text):
    """The whole argument must be consumed."""
    with pytest.raises(InvalidNumberError):
        parse_number(text)


def test_invalid_number_names_the_character():
    with pytest.raises(InvalidNumberError) as excinfo:
        parse_number("12a")
    assert excinfo.value.char == "a"
    assert str(excinfo.value) == "argument with invalid characters: `a'"

    with pytest.raises(InvalidNumberError) as excinfo:
        parse_number("0x")
    assert excinfo.value.char == "x"


def test_invalid_number_non_printable_shown_as_hex():
    with pytest.raises(InvalidNumberError) as excinfo:
        parse_number("12\x01")
    assert str(excinfo.value) == "argument with invalid characters: 1"


def test_empty_number_has_no_offending_character():
    with pytest.raises(InvalidNumberError) as excinfo:
        parse_number("")
    assert excinfo.value.char is None


def test_int64_limits():
    assert parse_number("9223372036854775807") == 2**63 - 1
    assert parse_number("-9223372036854775808") == -(2**63)
    with pytest.raises(NumberOverflowError):
        parse_number("9223372036854775808")
    with pytest.raises(NumberOverflowError):
        parse_number("0x10000000000000000")


@pytest.mark.parametrize("text", ["123", "0123", "0x7B", "\\xff", "-17", "0"])
def test_reparse_of_decimal_rendering(text):
    value = parse_number(text)
    assert parse_number(str(value)) == value


def test_parse_byte_range():
    assert parse_byte("255") == 255
    assert parse_byte("0xff") == 255
    assert parse_byte("ff", 16) == 255
    assert parse_byte("0x41", 16) == 0x41

    with pytest.raises(OutOfRangeError) as excinfo:
        parse_byte("256")
    assert excinfo.value.value == 256
    assert str(excinfo.value) == "argument value outside of 8 bit range: 256"

    with pytest.raises(OutOfRangeError):
        parse_byte("-1")
