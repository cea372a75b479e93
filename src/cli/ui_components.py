"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from core.domain.models import PageLinkDescriptor, ResolvedPageLink


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("bootstrap-markup", style="bold magenta")
    subtitle = Text("Bootstrap 5 helpers for Jinja2 • Alerts • Buttons • Pagination • Forms", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_plan_table(links: Iterable[PageLinkDescriptor]) -> Table:
    """Tabla Rich con el plan de paginación (un control por fila)."""

    table = Table(title="Pagination plan")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Label", style="white")
    table.add_column("Page", justify="right")
    table.add_column("Enabled")
    table.add_column("Active")
    table.add_column("Href", style="magenta")

    for link in links:
        href = link.href if isinstance(link, ResolvedPageLink) else ""
        table.add_row(
            link.kind.value,
            link.label,
            str(link.page_number),
            "[green]yes[/green]" if link.enabled else "[red]no[/red]",
            "[bold yellow]●[/bold yellow]" if link.is_active else "",
            href,
        )
    return table


def build_markup_panel(html: str, *, title: str) -> Panel:
    """Panel con el HTML resaltado."""

    return Panel(Syntax(html, "html", word_wrap=True), title=title, border_style="cyan")
