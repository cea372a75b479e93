"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.markup_assembler import render_cdn_scripts, render_cdn_styles
from adapters.pattern_library import render_pattern_library_html
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_templates(settings: AppSettings) -> tuple[bool, str]:
    """Render the pattern library to detect broken templates."""

    try:
        html = render_pattern_library_html(settings=settings)
    except Exception as exc:
        return False, f"{type(exc).__name__}: {exc}"
    return True, f"{len(html)} chars"


def _check_cdn(url: str, integrity: str | None) -> tuple[str, str]:
    if not url.startswith("https://"):
        return "WARN", f"Not served over HTTPS: {url}"
    if not integrity:
        return "OPTIONAL", f"{url} (no SRI hash)"
    return "OK", url


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="bootstrap-markup Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row(
        "Pagination",
        "OK",
        f"max_visible={settings.pagination_max_visible_pages} first/last={settings.pagination_show_first_last}",
    )

    # CDN
    status, detail = _check_cdn(settings.bootstrap_css_url, settings.bootstrap_css_integrity)
    table.add_row("Bootstrap CSS", status, detail)
    status, detail = _check_cdn(settings.bootstrap_js_url, settings.bootstrap_js_integrity)
    table.add_row("Bootstrap JS", status, detail)

    # Templates
    ok_tpl, detail_tpl = _check_templates(settings)
    table.add_row("Templates", "OK" if ok_tpl else "FAIL", detail_tpl)

    _console.print(table)

    if ok_tpl:
        _console.print(str(render_cdn_styles(settings)), markup=False, highlight=False, soft_wrap=True)
        _console.print(str(render_cdn_scripts(settings)), markup=False, highlight=False, soft_wrap=True)
    else:
        _console.print("\n[yellow]Note:[/yellow] Reinstall the package if bundled templates are missing.")
        raise typer.Exit(code=1)
