"""Parser del argumento `<char>` de `memset`.

Orden de resolución (gana la primera coincidencia):
1. Un único byte: el propio carácter.
2. `0x..`/`\\x..` (longitud > 2): byte hexadecimal.
3. `\\` + letra de la tabla de escapes (`n t r a b f v e`): carácter de control.
   Si no hay escape válido (o el escape vale 0), lo que sigue a `\\` se lee
   como decimal: `\\65` -> 0x41, `\\0` -> 0x00.
4. Cualquier otra forma es inválida.
"""

from __future__ import annotations

import os

from core.domain.models import ByteSpec
from core.domain.notation import CONTROL_ESCAPES, ByteNotation
from core.errors import InvalidByteSpecError
from core.parsers.numbers import parse_byte


def resolve_byte_spec(text: str) -> ByteSpec:
    """Resolve a fill-byte argument into one byte and its notation."""

    raw = os.fsencode(text)
    if len(raw) == 1:
        return ByteSpec(text=text, value=raw[0], notation=ByteNotation.LITERAL)

    if len(text) > 2 and text[0] in "0\\" and text[1] in "xX":
        value = parse_byte("0" + text[1:], 16)
        return ByteSpec(text=text, value=value, notation=ByteNotation.HEX)

    if text.startswith("\\"):
        value = 0
        if len(text) == 2:
            value = CONTROL_ESCAPES.get(text[1], 0)
        if value:
            return ByteSpec(text=text, value=value, notation=ByteNotation.CONTROL_ESCAPE)

        # An escape resolving to 0 is indistinguishable from "no escape".
        value = parse_byte(text[1:], 10)
        return ByteSpec(text=text, value=value, notation=ByteNotation.DECIMAL_ESCAPE)

    raise InvalidByteSpecError(text)


def parse_byte_spec(text: str) -> int:
    return resolve_byte_spec(text).value
