"""Integración con Jinja2.

Registra los helpers como globals de un `Environment` para usarlos desde
templates con argumentos simples:

    {{ bootstrap_alert("Saved", variant="success", dismissible=true) }}
    {{ bootstrap_pagination(page, pages, "/items?page={page}", size="small") }}
    {{ bootstrap_input_for(form, "email", placeholder="you@example.com", margin_bottom="3") }}

Las opciones de estilo llegan como strings y se validan con `StyleOptions`
(un `variant` desconocido lanza `pydantic.ValidationError`).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from jinja2 import Environment
from markupsafe import Markup

from adapters.markup_assembler import (
    render_alert,
    render_breadcrumb,
    render_button,
    render_cdn_scripts,
    render_cdn_styles,
    render_input_for,
    render_pagination,
)
from core.config import AppSettings
from core.domain.models import InputOptions, PaginationLabels, StyleOptions
from core.domain.style import Size
from core.interfaces.field_metadata import FieldMetadataProvider
from core.services.class_composer import compose


logger = logging.getLogger(__name__)


def as_page_url(page_url: Callable[[int], str] | str) -> Callable[[int], str]:
    """Acepta un callable o un patrón con `{page}`.

    Solo se sustituye `{page}`; cualquier otra llave queda tal cual.
    """

    if callable(page_url):
        return page_url
    pattern = str(page_url)
    return lambda page: pattern.replace("{page}", str(page))


def register_bootstrap_helpers(env: Environment, *, settings: AppSettings | None = None) -> Environment:
    """Añade los helpers `bootstrap_*` a `env.globals` y devuelve `env`."""

    settings = settings or AppSettings()

    def bootstrap_alert(message: str, **style: Any) -> Markup:
        return render_alert(message, options=StyleOptions(**style))

    def bootstrap_button(
        text: str,
        button_type: str = "button",
        href: str | None = None,
        attributes: dict[str, Any] | None = None,
        **style: Any,
    ) -> Markup:
        return render_button(
            text,
            options=StyleOptions(**style),
            button_type=button_type,
            href=href,
            attributes=attributes,
        )

    def bootstrap_breadcrumb(*items: Iterable[str]) -> Markup:
        return render_breadcrumb([tuple(item) for item in items])

    def bootstrap_pagination(
        current_page: int,
        total_pages: int,
        page_url: Callable[[int], str] | str,
        max_visible_pages: int | None = None,
        show_first_last: bool | None = None,
        size: str = Size.DEFAULT.value,
        **labels: str,
    ) -> Markup:
        base = settings.pagination_labels()
        return render_pagination(
            int(current_page),
            int(total_pages),
            as_page_url(page_url),
            max_visible_pages=max_visible_pages,
            show_first_last=show_first_last,
            labels=PaginationLabels(**{**base.model_dump(), **labels}),
            size=Size(size),
            settings=settings,
        )

    def bootstrap_input_for(metadata: FieldMetadataProvider, field_id: str, **options: Any) -> Markup:
        return render_input_for(
            metadata, field_id, options=InputOptions(**options), settings=settings
        )

    def bootstrap_classes(base_class: str, include_variant: bool = True, **style: Any) -> str:
        return compose(StyleOptions(**style), base_class, include_variant=include_variant)

    def bootstrap_cdn_styles() -> Markup:
        return render_cdn_styles(settings)

    def bootstrap_cdn_scripts() -> Markup:
        return render_cdn_scripts(settings)

    helpers = {
        "bootstrap_alert": bootstrap_alert,
        "bootstrap_button": bootstrap_button,
        "bootstrap_breadcrumb": bootstrap_breadcrumb,
        "bootstrap_pagination": bootstrap_pagination,
        "bootstrap_input_for": bootstrap_input_for,
        "bootstrap_classes": bootstrap_classes,
        "bootstrap_cdn_styles": bootstrap_cdn_styles,
        "bootstrap_cdn_scripts": bootstrap_cdn_scripts,
    }
    env.globals.update(helpers)
    logger.debug("Registered %d bootstrap helpers", len(helpers))
    return env

