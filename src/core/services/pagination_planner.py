"""Planificador de paginación.

Calcula la lista ordenada de controles (primera/anterior/ventana/siguiente/
última) sin conocer URLs ni HTML. La resolución de URLs se hace después, en
`resolve_links`, y solo para enlaces habilitados.
"""

from __future__ import annotations

from typing import Callable, Iterable

from core.domain.models import (
    PageLinkDescriptor,
    PageLinkKind,
    PaginationRequest,
    ResolvedPageLink,
)


DISABLED_HREF = "#"


def visible_window(current_page: int, total_pages: int, max_visible_pages: int) -> tuple[int, int]:
    """Devuelve `(start, end)` inclusivo de la ventana de números visibles.

    Primero se centra en la página actual (acotando a 1), luego se recorta al
    total y, si quedó más estrecha que `max_visible_pages`, se desliza a la
    izquierda.
    """

    start = max(1, current_page - max_visible_pages // 2)
    end = min(total_pages, start + max_visible_pages - 1)

    if end - start + 1 < max_visible_pages:
        start = max(1, end - max_visible_pages + 1)

    return start, end


def plan(request: PaginationRequest) -> list[PageLinkDescriptor]:
    """Calcula los descriptores a renderizar.

    `total_pages <= 1` produce una lista vacía (el llamador no renderiza nada).
    """

    current = request.current_page
    total = request.total_pages
    labels = request.labels

    if total <= 1:
        return []

    has_previous = current > 1
    has_next = current < total

    links: list[PageLinkDescriptor] = []

    if request.show_first_last:
        links.append(
            PageLinkDescriptor(
                page_number=1, label=labels.first, enabled=has_previous, kind=PageLinkKind.FIRST
            )
        )
    links.append(
        PageLinkDescriptor(
            page_number=current - 1,
            label=labels.previous,
            enabled=has_previous,
            kind=PageLinkKind.PREVIOUS,
        )
    )

    start, end = visible_window(current, total, request.max_visible_pages)
    for number in range(start, end + 1):
        links.append(
            PageLinkDescriptor(
                page_number=number,
                label=str(number),
                enabled=True,
                is_active=number == current,
            )
        )

    links.append(
        PageLinkDescriptor(
            page_number=current + 1, label=labels.next, enabled=has_next, kind=PageLinkKind.NEXT
        )
    )
    if request.show_first_last:
        links.append(
            PageLinkDescriptor(
                page_number=total, label=labels.last, enabled=has_next, kind=PageLinkKind.LAST
            )
        )

    return links


def resolve_links(
    links: Iterable[PageLinkDescriptor],
    page_url: Callable[[int], str],
) -> list[ResolvedPageLink]:
    """Adjunta el `href` de cada descriptor.

    `page_url` nunca se invoca para enlaces deshabilitados: reciben `#`.
    """

    resolved: list[ResolvedPageLink] = []
    for link in links:
        href = page_url(link.page_number) if link.enabled else DISABLED_HREF
        resolved.append(ResolvedPageLink(**link.model_dump(), href=href))
    return resolved
