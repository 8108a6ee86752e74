"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) para los
  valores que resultan de traducir argumentos a bytes.
- Los invariantes (un byte está en 0..255, un payload no está vacío) quedan
  declarados junto al dato.

Nota:
- Estos modelos describen *qué* se resolvió, no *cómo* se parseó.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.notation import ByteNotation, NumberBase

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class NumericLiteral(BaseModel):
    """Un argumento numérico (offset/longitud) ya resuelto.

    Por qué guardar la base:
    - Permite registrar en logs cómo se interpretó `0123` (octal) frente a
      `123` (decimal) sin volver a parsear.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        description="Argumento tal y como llegó por la línea de comandos.",
    )
    value: int = Field(
        ...,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Valor entero con signo (rango de 64 bits).",
    )
    base: NumberBase = Field(
        ...,
        description="Base detectada a partir del prefijo (10, 8 o 16).",
    )


class ByteSpec(BaseModel):
    """El byte de relleno de `memset` y la notación que lo produjo."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Argumento original.")
    value: int = Field(..., ge=0, le=255, description="Byte resultante.")
    notation: ByteNotation = Field(..., description="Forma reconocida del argumento.")


class HexPayload(BaseModel):
    """Secuencia de bytes decodificada de una cadena de dígitos hex.

    Invariante:
    - `len(data)` es el número de dígitos hex dividido entre 2, redondeando
      hacia arriba; un dígito final suelto es su propio byte.
    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., min_length=1, description="Bytes a escribir, en orden.")

    def __len__(self) -> int:
        return len(self.data)


class WriteReport(BaseModel):
    """Resultado de una escritura (explícita o de relleno)."""

    path: str = Field(..., description="Fichero escrito.")
    offset: int = Field(..., ge=0, description="Posición donde empezó la escritura.")
    bytes_written: int = Field(..., ge=0, description="Bytes escritos.")
