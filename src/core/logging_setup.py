"""Logging de la aplicación.

Por qué RichHandler:
- Misma consola (rich) que usa la CLI para errores, siempre en stderr, así
  el volcado hex de stdout queda limpio.
- Con el nivel por defecto (WARNING) no se emite nada.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings


def configure_logging(settings: AppSettings | None = None, *, console: Console | None = None) -> None:
    settings = settings or AppSettings()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=settings.log_level,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
