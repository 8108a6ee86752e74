"""Contrato del fichero sobre el que se opera.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el fichero real por un doble en tests (p.ej. para
  inyectar un fallo de escritura a mitad de un `memset`).
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class ByteTarget(Protocol):
    """Contrato mínimo para leer/escribir bytes en una posición.

    Reglas de diseño:
    - Un objeto = un descriptor abierto; se usa como context manager y se
      cierra en todas las salidas.
    - Los fallos de I/O se elevan como `core.errors.FileOperationError`.
    """

    path: str

    def __enter__(self) -> "ByteTarget": ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None: ...

    def size(self) -> int:
        """Tamaño actual del fichero, sin mover la posición."""

        ...

    def seek(self, offset: int) -> int:
        """Posiciona en `offset` (absoluto) y devuelve la nueva posición."""

        ...

    def seek_end(self) -> int:
        """Posiciona al final del fichero y devuelve la nueva posición."""

        ...

    def iter_bytes(self, count: int) -> Iterator[int]:
        """Itera hasta `count` bytes desde la posición actual."""

        ...

    def write(self, data: bytes) -> int:
        """Escribe `data` como un único bloque."""

        ...

    def write_repeated(self, value: int, count: int) -> int:
        """Escribe `value` `count` veces, una escritura por byte."""

        ...
