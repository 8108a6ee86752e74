"""Notations understood by the argument parsers.

This module centralizes the textual notations accepted for numbers and
fill bytes. Keeping them in the domain layer lets parsers, models and the
CLI help text share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class NumberBase(int, Enum):
    """Bases detected from a numeric argument's prefix."""

    DECIMAL = 10
    OCTAL = 8
    HEXADECIMAL = 16

    @classmethod
    def detect(cls, text: str) -> "NumberBase":
        """Pick the base from the argument's prefix.

        `0x`/`\\x` (any case of the `x`) with at least one more character is
        hexadecimal, any other multi-character text starting with `0` is
        octal, everything else is decimal.
        """

        if len(text) > 2 and text[0] in "0\\" and text[1] in "xX":
            return cls.HEXADECIMAL
        if len(text) > 1 and text[0] == "0":
            return cls.OCTAL
        return cls.DECIMAL

    def label(self) -> str:
        """Human readable label for logging."""

        return self.name.lower()


class ByteNotation(str, Enum):
    """Forms a fill-byte argument can take."""

    LITERAL = "literal"
    HEX = "hex"
    CONTROL_ESCAPE = "control-escape"
    DECIMAL_ESCAPE = "decimal-escape"


CONTROL_ESCAPES: dict[str, int] = {
    "n": 0x0A,
    "t": 0x09,
    "r": 0x0D,
    "a": 0x07,
    "b": 0x08,
    "f": 0x0C,
    "v": 0x0B,
    "e": 0x1B,
}
