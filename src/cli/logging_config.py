"""Configuración de logging para la CLI (Rich).

Por qué aquí:
- La librería solo emite records (`logging.getLogger(__name__)`); decidir
  handlers y nivel es cosa del proceso que la usa.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> None:
    """Instala un `RichHandler` en el root logger (stderr por defecto)."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
