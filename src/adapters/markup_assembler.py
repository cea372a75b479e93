"""Ensamblado de markup Bootstrap.

Por qué está en adapters:
- El HTML es un detalle de infraestructura (Jinja2/markupsafe).
- El Core solo produce strings de clases (`compose`) y descriptores de
  paginación (`plan`); aquí se convierten en tags.

Todas las funciones devuelven `markupsafe.Markup`, listo para insertarse en
un template con autoescape.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from core.config import AppSettings
from core.domain.models import (
    BreadcrumbItem,
    InputOptions,
    PaginationLabels,
    PaginationRequest,
    StyleOptions,
)
from core.domain.style import Size, ValidationState
from core.interfaces.field_metadata import FieldMetadataProvider
from core.services.class_composer import compose, margin_class
from core.services.pagination_planner import plan, resolve_links


logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_EMPTY = Markup("")


def build_environment() -> Environment:
    """Crea un `Environment` Jinja2 sobre los templates del paquete.

    Por qué un builder:
    - Los helpers usan una instancia cacheada (`_get_env`).
    - La pattern library crea una nueva para registrar globals sin tocar la
      compartida.
    """

    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    return build_environment()


def _render(template_name: str, **context: Any) -> Markup:
    html = _get_env().get_template(template_name).render(**context)
    return Markup(html)


def normalize_attributes(attributes: Mapping[str, Any] | None) -> dict[str, Any]:
    """Normaliza atributos HTML extra.

    - `data_bs_toggle` -> `data-bs-toggle` (kwargs de Python/Jinja).
    - `True` -> atributo booleano (`disabled="disabled"`); `False`/None se omite.
    """

    normalized: dict[str, Any] = {}
    for key, value in (attributes or {}).items():
        name = str(key).replace("_", "-")
        if value is True:
            value = name
        elif value is False:
            value = None
        normalized[name] = value
    return normalized


def _merge_class(composed: str, extra: Any) -> str:
    if not extra:
        return composed
    tokens = composed.split() + str(extra).split()
    return " ".join(dict.fromkeys(tokens))


def render_alert(message: str, *, options: StyleOptions | None = None) -> Markup:
    """Alerta Bootstrap (`alert alert-{variant}`), opcionalmente descartable."""

    options = options or StyleOptions()
    return _render(
        "alert.html",
        classes=compose(options, "alert"),
        dismissible=options.dismissible,
        message=message,
    )


def render_button(
    text: str,
    *,
    options: StyleOptions | None = None,
    button_type: str = "button",
    href: str | None = None,
    attributes: Mapping[str, Any] | None = None,
) -> Markup:
    """Botón Bootstrap; un `href` lo convierte en `<a>`.

    Los atributos extra se mezclan con los generados: una `class` extra se
    añade tras las compuestas; `type`/`href` siempre son los del helper.
    """

    options = options or StyleOptions()
    merged = normalize_attributes(attributes)
    merged["class"] = _merge_class(compose(options, "btn"), merged.get("class"))

    if href:
        tag = "a"
        merged.pop("type", None)
        merged["href"] = href
    else:
        tag = "button"
        merged.pop("href", None)
        merged["type"] = button_type

    return _render("button.html", tag=tag, attributes=merged, text=text)


def render_breadcrumb(items: Iterable[BreadcrumbItem | tuple[str, ...]]) -> Markup:
    """Breadcrumb Bootstrap 5; el último elemento es la página activa.

    Ejemplo:
        render_breadcrumb([("Home", "/"), ("Products", "/products"), ("Laptops",)])

    Una tupla de un solo elemento es un crumb sin URL.
    """

    crumbs = [
        item
        if isinstance(item, BreadcrumbItem)
        else BreadcrumbItem(text=item[0], url=item[1] if len(item) > 1 else "")
        for item in items
    ]
    if not crumbs:
        return _EMPTY
    return _render("breadcrumb.html", items=crumbs)


def render_pagination(
    current_page: int,
    total_pages: int,
    page_url: Callable[[int], str],
    *,
    max_visible_pages: int | None = None,
    show_first_last: bool | None = None,
    labels: PaginationLabels | None = None,
    size: Size = Size.DEFAULT,
    settings: AppSettings | None = None,
) -> Markup:
    """Paginación Bootstrap.

    Los valores no indicados se toman de `AppSettings`. Devuelve markup vacío
    cuando hay una página o menos.
    """

    settings = settings or AppSettings()
    request = PaginationRequest(
        current_page=current_page,
        total_pages=total_pages,
        max_visible_pages=(
            max_visible_pages if max_visible_pages is not None else settings.pagination_max_visible_pages
        ),
        show_first_last=(
            show_first_last if show_first_last is not None else settings.pagination_show_first_last
        ),
        labels=labels or settings.pagination_labels(),
    )

    descriptors = plan(request)
    if not descriptors:
        logger.debug("Pagination skipped: total_pages=%s", total_pages)
        return _EMPTY

    links = resolve_links(descriptors, page_url)
    logger.debug(
        "Pagination rendered: page %s/%s, %d links", current_page, total_pages, len(links)
    )
    classes = compose(StyleOptions(size=size), "pagination", include_variant=False)
    return _render("pagination.html", classes=classes, links=links)


def render_input_for(
    metadata: FieldMetadataProvider,
    field_id: str,
    *,
    options: InputOptions | None = None,
    settings: AppSettings | None = None,
) -> Markup:
    """Input de formulario con etiqueta y mensaje de validación.

    La metadata (requerido, solo lectura, validación, nombre visible) viene de
    un `FieldMetadataProvider` explícito.
    """

    options = options or InputOptions()
    settings = settings or AppSettings()

    required = metadata.is_field_required(field_id)
    read_only = metadata.is_field_read_only(field_id)
    state = metadata.get_validation_state(field_id)

    is_textarea = options.input_type.lower() == "textarea"
    input_type = options.input_type
    if not is_textarea and metadata.is_email_field(field_id):
        input_type = "email"

    classes = compose(
        StyleOptions(
            size=options.size,
            validation_state=None if state is ValidationState.NONE else state,
        ),
        "form-control",
        include_variant=False,
    )

    value = metadata.get_value(field_id)
    attributes: dict[str, Any] = {
        "id": field_id,
        "name": field_id,
        "type": None if is_textarea else input_type,
        "value": None if is_textarea else value,
        "placeholder": options.placeholder or None,
        "class": classes,
        "required": "required" if required else None,
        "readonly": "readonly" if read_only else None,
    }
    attributes.update(normalize_attributes(options.attributes))

    add_asterisk = options.add_required_asterisk
    if add_asterisk is None:
        add_asterisk = settings.add_required_asterisk

    logger.debug("Input rendered: field=%s state=%s required=%s", field_id, state.value, required)
    return _render(
        "input.html",
        wrapper_attributes={"class": margin_class(options.margin_bottom)},
        field_id=field_id,
        label=metadata.get_display_name(field_id),
        show_asterisk=required and add_asterisk,
        is_textarea=is_textarea,
        attributes=attributes,
        value=value or "",
        error_message=metadata.get_error_message(field_id) or "",
    )


def render_cdn_styles(settings: AppSettings | None = None) -> Markup:
    """`<link>` a la hoja de estilos de Bootstrap en el CDN configurado."""

    settings = settings or AppSettings()
    return _render(
        "cdn_styles.html",
        attributes={
            "rel": "stylesheet",
            "href": settings.bootstrap_css_url,
            "integrity": settings.bootstrap_css_integrity,
            "crossorigin": "anonymous",
        },
    )


def render_cdn_scripts(settings: AppSettings | None = None) -> Markup:
    """`<script>` con el bundle JavaScript de Bootstrap."""

    settings = settings or AppSettings()
    return _render(
        "cdn_scripts.html",
        attributes={
            "src": settings.bootstrap_js_url,
            "integrity": settings.bootstrap_js_integrity,
            "crossorigin": "anonymous",
        },
    )
