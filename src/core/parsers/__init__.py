"""Traducción de argumentos de texto a valores y bytes.

Por qué un paquete:
- Cada notación (números, byte de relleno, payload hex) tiene su módulo.
- Son funciones puras: no tocan ficheros ni consola, así se testean solas.
"""

from core.parsers.byte_spec import parse_byte_spec, resolve_byte_spec
from core.parsers.hex_payload import decode_payload, parse_hex_payload
from core.parsers.numbers import parse_byte, parse_literal, parse_number

__all__ = [
    "decode_payload",
    "parse_byte",
    "parse_byte_spec",
    "parse_hex_payload",
    "parse_literal",
    "parse_number",
    "resolve_byte_spec",
]
