"""Decodificador del argumento `<data>` de `write`.

Reglas:
- Los espacios en blanco se ignoran (en cualquier posición).
- Los dígitos se agrupan de dos en dos: `DEADBEEF` -> DE AD BE EF.
- Un dígito final suelto es un byte con su propio valor, sin desplazar:
  `ABC` -> AB 0C.
"""

from __future__ import annotations

import string

from core.domain.models import HexPayload
from core.errors import EmptyPayloadError, InvalidHexDigitError

_C_SPACE = frozenset(" \t\n\v\f\r")
_HEX_DIGITS = frozenset(string.hexdigits)


def decode_payload(text: str) -> HexPayload:
    data = bytearray()
    pending: str | None = None

    for char in text:
        if char in _C_SPACE:
            continue
        if char not in _HEX_DIGITS:
            raise InvalidHexDigitError(char)

        if pending is None:
            pending = char
        else:
            data.append(int(pending + char, 16))
            pending = None

    if pending is not None:
        data.append(int(pending, 16))

    if not data:
        raise EmptyPayloadError()
    return HexPayload(data=bytes(data))


def parse_hex_payload(text: str) -> bytes:
    """Decode a whitespace-tolerant hex string into raw bytes."""

    return decode_payload(text).data
