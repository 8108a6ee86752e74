"""Errores del Core.

Por qué una jerarquía propia:
- La CLI solo necesita capturar `HexEditError` para convertir cualquier fallo
  en un mensaje + código de salida 1.
- Cada error nombra el argumento o carácter culpable, así el mensaje es útil
  sin traceback.
"""

from __future__ import annotations

import os


def display_text(text: str) -> str:
    """Argument text with undecodable command-line bytes shown as `\\xNN`."""

    return os.fsencode(text).decode("utf-8", "backslashreplace")


def describe_char(char: str) -> str:
    """Render an offending character the way the diagnostics expect.

    Printable ASCII is quoted as `` `c' ``; anything else is shown as the
    lowercase hex bytes it had on the command line.
    """

    if char.isascii() and char.isprintable():
        return f"`{char}'"
    return " ".join(f"{byte:x}" for byte in os.fsencode(char))


class HexEditError(Exception):
    """Base de todos los errores de dominio."""


class InvalidNumberError(HexEditError):
    def __init__(self, text: str, char: str | None = None) -> None:
        self.text = text
        self.char = char
        if char is None:
            message = f"argument is not a number: `{text}'"
        else:
            message = f"argument with invalid characters: {describe_char(char)}"
        super().__init__(message)


class NumberOverflowError(HexEditError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"numerical result out of range: {text}")


class OutOfRangeError(HexEditError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"argument value outside of 8 bit range: {value}")


class OffsetOutOfRangeError(HexEditError):
    def __init__(self, offset: int, size: int) -> None:
        self.offset = offset
        self.size = size
        super().__init__("offset equals or exceeds filesize")


class InvalidLengthError(HexEditError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"length must be 1 or more: {text}")


class InvalidHexDigitError(HexEditError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"{describe_char(char)} is not a hexadecimal digit")


class EmptyArgumentError(HexEditError):
    def __init__(self) -> None:
        super().__init__("empty argument")


class EmptyPayloadError(HexEditError):
    def __init__(self) -> None:
        super().__init__("no hexadecimal digits in data argument")


class InvalidByteSpecError(HexEditError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid argument: {display_text(text)}")


class FileOperationError(HexEditError):
    """Fallo de I/O con el texto del error del sistema.

    `operation` es la llamada que falló (open, lseek, read, write).
    """

    def __init__(self, operation: str, path: str, strerror: str | None) -> None:
        self.operation = operation
        self.path = path
        self.strerror = strerror or "unknown error"
        super().__init__(f"{operation}(): {self.strerror}: `{path}'")

    @classmethod
    def from_os_error(cls, operation: str, path: str, exc: OSError) -> "FileOperationError":
        return cls(operation, path, exc.strerror or str(exc))
