"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los adaptadores (Jinja2/CLI) lean defaults de forma consistente
  (CDN de Bootstrap, textos de paginación, asterisco de requeridos).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import PaginationLabels


BOOTSTRAP_VERSION = "5.3.3"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "bootstrap-markup"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "bootstrap-markup"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "bootstrap-markup"
    return Path.home() / ".config" / "bootstrap-markup"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la librería.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para helpers, integración Jinja y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOTSTRAP_MARKUP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    bootstrap_css_url: str = Field(
        default=f"https://cdn.jsdelivr.net/npm/bootstrap@{BOOTSTRAP_VERSION}/dist/css/bootstrap.min.css",
        min_length=1,
        description="URL de la hoja de estilos de Bootstrap (CDN).",
    )
    bootstrap_css_integrity: str | None = Field(
        default="sha384-QWTKZyjpPEjISv5WaRU9OFeRpok6YctnYmDr5pNlyT2bRjXh0JMhjY6hW+ALEwIH",
        description="Hash SRI de la hoja de estilos (None lo omite).",
    )
    bootstrap_js_url: str = Field(
        default=f"https://cdn.jsdelivr.net/npm/bootstrap@{BOOTSTRAP_VERSION}/dist/js/bootstrap.bundle.min.js",
        min_length=1,
        description="URL del bundle JavaScript de Bootstrap (CDN).",
    )
    bootstrap_js_integrity: str | None = Field(
        default="sha384-YvpcrYf0tY3lHB60NNkmXc5s9fDVZLESaAA55NDzOxhy9GkcIdslK1eN7N6jIeHz",
        description="Hash SRI del bundle JavaScript (None lo omite).",
    )

    # Paginación
    pagination_max_visible_pages: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Máximo de números de página visibles por defecto.",
    )
    pagination_show_first_last: bool = Field(
        default=True,
        description="Mostrar enlaces 'primera'/'última' por defecto.",
    )
    pagination_first_text: str = Field(default="«", min_length=1)
    pagination_last_text: str = Field(default="»", min_length=1)
    pagination_previous_text: str = Field(default="‹", min_length=1)
    pagination_next_text: str = Field(default="›", min_length=1)

    add_required_asterisk: bool = Field(
        default=True,
        description="Añadir '(*)' a las etiquetas de campos requeridos.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )

    def pagination_labels(self) -> PaginationLabels:
        return PaginationLabels(
            first=self.pagination_first_text,
            last=self.pagination_last_text,
            previous=self.pagination_previous_text,
            next=self.pagination_next_text,
        )
