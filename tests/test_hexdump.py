"""
Tests for the hex dump layout.
"""

from core.services.hexdump import DumpLine, format_line, iter_dump_lines, render

FULL_ROW = " 00 01 02 03  04 05 06 07  08 09 0A 0B  0C 0D 0E 0F\n"


def test_seventeen_bytes_make_two_lines():
    assert render(bytes(range(17))) == FULL_ROW + " 10\n"


def test_exact_row():
    assert render(bytes(range(16))) == FULL_ROW
    assert render(bytes(range(32))) == FULL_ROW + FULL_ROW.replace(" 0", " 1")


def test_group_separator_before_line_end():
    """A short range ending on a group boundary keeps the separator space."""
    assert render(b"\x01\x02\x03\x04") == " 01 02 03 04 \n"
    assert render(b"\x01\x02\x03\x04\x05") == " 01 02 03 04  05\n"


def test_uppercase_two_digits():
    assert render(b"\xff\x0a") == " FF 0A\n"


def test_empty_input():
    assert render(b"") == ""


def test_source_exhausted_early():
    """A short source closes the pending row and stops without padding."""
    assert render(b"\xab", length=3) == " AB\n"
    # Exhausted on a row boundary: the row is already closed, so an empty
    # line follows.
    assert render(bytes(range(16)), length=20) == FULL_ROW + "\n"
    assert render(b"", length=4) == "\n"


def test_empty_dump_line_is_a_bare_break():
    assert DumpLine(b"").render() == "\n"
    assert format_line(b"\x10") == " 10\n"


def test_lines_are_streamed():
    def source():
        yield from range(16)
        raise AssertionError("consumed past the first row")

    lines = iter_dump_lines(source(), 32)
    assert next(lines).data == bytes(range(16))


def test_length_limits_output():
    lines = list(iter_dump_lines(range(100), 5))
    assert [line.data for line in lines] == [bytes(range(5))]
