"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta en el borde (strings de Jinja/CLI -> enums) sin
  acoplar el Core a Jinja2 ni a ningún framework web.
- Los modelos son inmutables (`frozen`): se crean en cada render y se
  descartan, sin identidad más allá de sus valores.

Nota:
- Estos modelos describen *qué* se va a renderizar, no *cómo*.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.style import Margin, Size, ValidationState, Variant


class StyleOptions(BaseModel):
    """Opciones semánticas de estilo para un elemento.

    Por qué existe:
    - Sustituye la lista creciente de parámetros opcionales de cada helper
      por un único valor con opciones nombradas.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    variant: Variant | None = Field(
        default=None,
        description="Rol de color (p.ej. 'danger' -> `btn-danger`).",
    )
    outline_variant: Variant | None = Field(
        default=None,
        description="Rol de color en versión outline; solo aplica si no hay `variant`.",
    )
    size: Size = Field(
        default=Size.DEFAULT,
        description="Modificador de tamaño (`sm`/`lg`).",
    )
    margin: Margin | None = Field(
        default=None,
        description="Margen inferior (`mb-0`..`mb-5`, `mb-auto`).",
    )
    dismissible: bool = Field(
        default=False,
        description="Añade el modificador `-dismissible` (alertas).",
    )
    validation_state: ValidationState | None = Field(
        default=None,
        description="Estado de validación (`is-valid`/`is-invalid`).",
    )


class PaginationLabels(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    first: str = "«"
    last: str = "»"
    previous: str = "‹"
    next: str = "›"


class PaginationRequest(BaseModel):
    """Entrada del planificador de paginación.

    Importante:
    - `current_page` y `total_pages` no se validan: el planificador devuelve
      un plan vacío cuando `total_pages <= 1` (incluidos negativos).
    """

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(..., description="Página activa (1-indexada).")
    total_pages: int = Field(..., description="Número total de páginas.")
    max_visible_pages: int = Field(
        default=5,
        ge=1,
        description="Máximo de enlaces numerados visibles (par o impar).",
    )
    show_first_last: bool = Field(
        default=True,
        description="Incluye los enlaces 'primera' y 'última'.",
    )
    labels: PaginationLabels = Field(default_factory=PaginationLabels)


class PageLinkKind(str, Enum):
    FIRST = "first"
    PREVIOUS = "previous"
    PAGE = "page"
    NEXT = "next"
    LAST = "last"


class PageLinkDescriptor(BaseModel):
    """Un control de paginación renderizable.

    Los enlaces deshabilitados conservan su `page_number` objetivo (0 o
    `total_pages + 1` incluidos); quien renderiza no debe resolver su URL.
    """

    model_config = ConfigDict(frozen=True)

    page_number: int
    label: str
    enabled: bool
    is_active: bool = False
    kind: PageLinkKind = PageLinkKind.PAGE


class ResolvedPageLink(PageLinkDescriptor):
    """Descriptor con su `href` ya resuelto (`#` si está deshabilitado)."""

    href: str


class BreadcrumbItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    url: str = ""


class InputOptions(BaseModel):
    """Opciones del helper de inputs de formulario.

    Por qué un modelo:
    - Agrupa tipo, placeholder, tamaño, margen y atributos extra en un único
      valor documentado en vez de siete parámetros opcionales.
    """

    model_config = ConfigDict(frozen=True)

    input_type: str = Field(
        default="text",
        min_length=1,
        description="Tipo del input; 'textarea' genera un <textarea>.",
    )
    placeholder: str = ""
    size: Size = Size.DEFAULT
    margin_bottom: Margin | None = None
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Atributos HTML extra; sobrescriben los generados.",
    )
    add_required_asterisk: bool | None = Field(
        default=None,
        description="Asterisco en la etiqueta de campos requeridos (None -> config).",
    )
