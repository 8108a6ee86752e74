"""Parser de argumentos numéricos (offset/longitud).

Notaciones:
- decimal: `123`
- octal:   `0123`
- hex:     `0x7B`, `\\x7B` (la `\\` es un prefijo alternativo a `0`)

Reglas:
- Todo el texto debe consumirse; cualquier carácter sobrante es un error que
  nombra ese carácter.
- La conversión sigue a `strtol`: espacios iniciales y signo opcionales.
"""

from __future__ import annotations

from core.domain.models import INT64_MAX, INT64_MIN, NumericLiteral
from core.domain.notation import NumberBase
from core.errors import InvalidNumberError, NumberOverflowError, OutOfRangeError

_C_SPACE = " \t\n\v\f\r"


def _digit_value(char: str) -> int:
    if char.isascii() and char.isalnum():
        return int(char, 36)
    return 99


def _convert(text: str, base: int, *, source: str | None = None) -> int:
    """Convert `text` in `base`, requiring the whole string to be consumed.

    `source` is the argument as the user typed it, used in error messages
    when `text` is a normalized copy.
    """

    source = text if source is None else source
    pos, end = 0, len(text)

    while pos < end and text[pos] in _C_SPACE:
        pos += 1

    negative = False
    if pos < end and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    if base == 16 and text[pos : pos + 2] in ("0x", "0X") and pos + 2 < end:
        if _digit_value(text[pos + 2]) < 16:
            pos += 2

    start = pos
    value = 0
    while pos < end:
        digit = _digit_value(text[pos])
        if digit >= base:
            break
        value = value * base + digit
        pos += 1

    if pos == start:
        # Nothing converted: strtol leaves the end pointer at the start.
        raise InvalidNumberError(source, source[0] if source else None)

    if negative:
        value = -value
    if not INT64_MIN <= value <= INT64_MAX:
        raise NumberOverflowError(source)

    if pos < end:
        raise InvalidNumberError(source, text[pos])

    return value


def parse_literal(text: str) -> NumericLiteral:
    """Parse an offset/length argument, keeping the detected base."""

    base = NumberBase.detect(text)
    if base is NumberBase.HEXADECIMAL:
        # "\x7B" -> "0x7B"
        value = _convert("0" + text[1:], 16, source=text)
    else:
        value = _convert(text, base.value)
    return NumericLiteral(text=text, value=value, base=base)


def parse_number(text: str) -> int:
    """Parse an offset/length argument into a signed integer."""

    return parse_literal(text).value


def parse_byte(text: str, base: int | None = None) -> int:
    """Parse a single byte value (0..255).

    With an explicit `base` the text is converted in that base as-is;
    without one the notation is detected like `parse_number`.
    """

    value = parse_number(text) if base is None else _convert(text, base)
    if not 0 <= value <= 255:
        raise OutOfRangeError(value)
    return value
