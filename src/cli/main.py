"""CLI de bootstrap-markup (Typer).

Permite previsualizar cada helper desde la terminal, inspeccionar planes de
paginación y exportar la pattern library.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_pagination_plan_json
from adapters.markup_assembler import (
    render_alert,
    render_breadcrumb,
    render_button,
    render_pagination,
)
from adapters.jinja_helpers import as_page_url
from adapters.pattern_library import export_pattern_library_html
from cli.doctor import app as doctor_app
from cli.logging_config import configure_logging
from cli.ui_components import build_markup_panel, build_plan_table, print_banner
from core.config import AppSettings
from core.domain.models import BreadcrumbItem, PaginationRequest, StyleOptions
from core.domain.style import Margin, Size, ValidationState, Variant
from core.services.class_composer import compose
from core.services.pagination_planner import plan, resolve_links

app = typer.Typer(
    no_args_is_help=True,
    help="Bootstrap 5 markup helpers: preview components and build the pattern library.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()


def _emit(html: str, *, title: str, pretty: bool) -> None:
    if pretty:
        _console.print(build_markup_panel(html, title=title))
    else:
        typer.echo(html)


def _parse_breadcrumb_item(raw: str) -> BreadcrumbItem:
    text, _, url = raw.partition("=")
    if not text.strip():
        raise typer.BadParameter(f"Breadcrumb item without text: {raw!r}")
    return BreadcrumbItem(text=text.strip(), url=url.strip())


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def classes(
    base_class: str = typer.Argument(..., help="Base class, e.g. btn or alert."),
    variant: Optional[Variant] = typer.Option(None, "--variant", case_sensitive=False),
    outline: Optional[Variant] = typer.Option(None, "--outline", case_sensitive=False),
    size: Size = typer.Option(Size.DEFAULT, "--size", case_sensitive=False),
    margin: Optional[Margin] = typer.Option(None, "--margin"),
    dismissible: bool = typer.Option(False, "--dismissible"),
    validation: Optional[ValidationState] = typer.Option(None, "--validation", case_sensitive=False),
) -> None:
    """Print the composed CSS class string."""

    options = StyleOptions(
        variant=variant,
        outline_variant=outline,
        size=size,
        margin=margin,
        dismissible=dismissible,
        validation_state=validation,
    )
    typer.echo(compose(options, base_class))


@app.command()
def alert(
    message: str = typer.Argument(...),
    variant: Variant = typer.Option(Variant.PRIMARY, "--variant", case_sensitive=False),
    dismissible: bool = typer.Option(False, "--dismissible"),
    pretty: bool = typer.Option(False, "--pretty", help="Show highlighted markup."),
) -> None:
    """Render an alert."""

    html = render_alert(message, options=StyleOptions(variant=variant, dismissible=dismissible))
    _emit(str(html), title="Alert", pretty=pretty)


@app.command()
def button(
    text: str = typer.Argument(...),
    variant: Optional[Variant] = typer.Option(None, "--variant", case_sensitive=False),
    outline: Optional[Variant] = typer.Option(None, "--outline", case_sensitive=False),
    size: Size = typer.Option(Size.DEFAULT, "--size", case_sensitive=False),
    button_type: str = typer.Option("button", "--type"),
    href: Optional[str] = typer.Option(None, "--href"),
    pretty: bool = typer.Option(False, "--pretty", help="Show highlighted markup."),
) -> None:
    """Render a button (or a link styled as a button with --href)."""

    options = StyleOptions(variant=variant, outline_variant=outline, size=size)
    html = render_button(text, options=options, button_type=button_type, href=href)
    _emit(str(html), title="Button", pretty=pretty)


@app.command()
def breadcrumb(
    items: List[str] = typer.Argument(..., help="Items as 'Text=/url'; the last one may omit the URL."),
    pretty: bool = typer.Option(False, "--pretty", help="Show highlighted markup."),
) -> None:
    """Render a breadcrumb trail."""

    crumbs = [_parse_breadcrumb_item(raw) for raw in items]
    _emit(str(render_breadcrumb(crumbs)), title="Breadcrumb", pretty=pretty)


@app.command()
def pagination(
    current: int = typer.Option(..., "--current", help="Current page (1-based)."),
    total: int = typer.Option(..., "--total", help="Total pages."),
    max_visible: Optional[int] = typer.Option(None, "--max-visible", min=1),
    first_last: Optional[bool] = typer.Option(None, "--first-last/--no-first-last"),
    size: Size = typer.Option(Size.DEFAULT, "--size", case_sensitive=False),
    url_pattern: str = typer.Option("?page={page}", "--url-pattern", help="URL pattern with {page}."),
    table: bool = typer.Option(False, "--table", help="Show the plan as a table instead of markup."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also export the plan as JSON."),
    pretty: bool = typer.Option(False, "--pretty", help="Show highlighted markup."),
) -> None:
    """Render pagination, or inspect its plan."""

    settings = AppSettings()
    page_url = as_page_url(url_pattern)

    if table or json_path:
        request = PaginationRequest(
            current_page=current,
            total_pages=total,
            max_visible_pages=max_visible or settings.pagination_max_visible_pages,
            show_first_last=settings.pagination_show_first_last if first_last is None else first_last,
            labels=settings.pagination_labels(),
        )
        links = resolve_links(plan(request), page_url)
        if json_path:
            export_pagination_plan_json(links=links, output_path=json_path)
            _console.print(f"[green]Saved plan to:[/green] {json_path}")
        if table:
            _console.print(build_plan_table(links))
            return

    html = render_pagination(
        current,
        total,
        page_url,
        max_visible_pages=max_visible,
        show_first_last=first_last,
        size=size,
        settings=settings,
    )
    _emit(str(html), title="Pagination", pretty=pretty)


@app.command(name="pattern-library")
def pattern_library(
    output: Path = typer.Option(Path("pattern-library.html"), "--output", "-o"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the banner."),
) -> None:
    """Export the pattern library (every component on one page)."""

    if not quiet:
        print_banner(_console)
    path = export_pattern_library_html(output_path=output)
    _console.print(f"[green]Pattern library written to:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
