"""
Tests for the write payload decoder.
"""

import os

import pytest

from core.errors import EmptyPayloadError, InvalidHexDigitError
from core.parsers.hex_payload import decode_payload, parse_hex_payload


def test_contiguous_digits():
    assert parse_hex_payload("DEADBEEF") == bytes([0xDE, 0xAD, 0xBE, 0xEF])
    assert parse_hex_payload("deadbeef") == bytes([0xDE, 0xAD, 0xBE, 0xEF])


def test_trailing_odd_digit_is_not_shifted():
    assert parse_hex_payload("ABC") == bytes([0xAB, 0x0C])
    assert parse_hex_payload("7") == bytes([0x07])


def test_whitespace_is_ignored_anywhere():
    assert parse_hex_payload("de ad\tbe\nef") == bytes([0xDE, 0xAD, 0xBE, 0xEF])
    # Pairs are formed across whitespace.
    assert parse_hex_payload("a b c") == bytes([0xAB, 0x0C])
    assert parse_hex_payload("  01\v02\f03\r ") == bytes([1, 2, 3])


def test_payload_length():
    assert len(decode_payload("0102030")) == 4


def test_invalid_digit():
    with pytest.raises(InvalidHexDigitError) as excinfo:
        parse_hex_payload("zz")
    assert excinfo.value.char == "z"
    assert str(excinfo.value) == "`z' is not a hexadecimal digit"

    with pytest.raises(InvalidHexDigitError) as excinfo:
        parse_hex_payload("0x41")
    assert excinfo.value.char == "x"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_empty_payload(text):
    with pytest.raises(EmptyPayloadError):
        parse_hex_payload(text)


def test_undecodable_byte_is_named_by_value():
    """Bytes that are not UTF-8 are reported as the byte given, not a surrogate."""
    with pytest.raises(InvalidHexDigitError) as excinfo:
        parse_hex_payload(os.fsdecode(b"ab\xff"))
    assert str(excinfo.value) == "ff is not a hexadecimal digit"
