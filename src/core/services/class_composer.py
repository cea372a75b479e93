"""Composición de clases CSS de Bootstrap.

Por qué es una función pura:
- Todos los helpers (alertas, botones, paginación, inputs) comparten las mismas
  reglas de nombrado `{base}-{modificador}`; centralizarlas evita que cada
  helper reimplemente (y diverja en) el orden de los tokens.
"""

from __future__ import annotations

from core.domain.models import StyleOptions
from core.domain.style import Margin, Size, ValidationState, Variant


def margin_class(margin: Margin | None) -> str | None:
    """Clase `mb-*` para un margen, o None si no hay margen."""

    if margin is None:
        return None
    return f"mb-{margin.value}"


def compose(options: StyleOptions, base_class: str, *, include_variant: bool = True) -> str:
    """Construye el string de clases para `base_class`.

    Orden fijo: base, variante (o outline, o `primary` por defecto), tamaño,
    dismissible, margen, validación. Sin tokens duplicados.

    `include_variant=False` omite el paso de variante para componentes sin
    rol de color (`pagination`, `form-control`).
    """

    tokens = [base_class]

    if include_variant:
        if options.variant is not None:
            tokens.append(f"{base_class}-{options.variant.value}")
        elif options.outline_variant is not None:
            tokens.append(f"{base_class}-outline-{options.outline_variant.value}")
        else:
            tokens.append(f"{base_class}-{Variant.default().value}")

    if options.size is not Size.DEFAULT:
        tokens.append(f"{base_class}-{options.size.token}")

    if options.dismissible:
        tokens.append(f"{base_class}-dismissible")

    mb = margin_class(options.margin)
    if mb:
        tokens.append(mb)

    if options.validation_state is ValidationState.INVALID:
        tokens.append("is-invalid")
    elif options.validation_state is ValidationState.VALID:
        tokens.append("is-valid")

    return " ".join(dict.fromkeys(tokens))
