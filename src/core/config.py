"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el driver de ficheros y el logging lean config de forma
  consistente.

Los valores por defecto reproducen el comportamiento clásico de la
herramienta; no se lee ningún fichero de configuración.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEXEDIT_",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (CRITICAL, ERROR, WARNING, INFO, DEBUG).",
    )
    create_mode: int = Field(
        default=0o664,
        ge=0,
        le=0o7777,
        description="Permisos de los ficheros creados por write/memset.",
    )
    read_chunk_size: int = Field(
        default=4096,
        ge=1,
        le=16 * 1024 * 1024,
        description="Bytes pedidos al sistema en cada lectura del volcado.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level
