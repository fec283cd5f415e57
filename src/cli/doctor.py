"""Comando `doctor`: diagnóstico del entorno.

Por qué un subcomando aparte:
- Muestra la configuración efectiva y prueba el endpoint real sin renderizar
  la vista de quotes.
- Las celdas con datos externos (URL, autor, errores) van como `Text`, así
  Rich no las interpreta como markup.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from adapters.http_client import build_async_client
from adapters.quote_api import QuoteApiClient
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import QuoteFetchError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_quote_endpoint(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            quote = await QuoteApiClient(client).fetch_by_id(settings.default_quote_id)
    except QuoteFetchError as exc:
        return False, str(exc)
    return True, f"quote #{quote.id} by {quote.author}"


@app.command()
def run() -> None:
    """Muestra la configuración efectiva y prueba el endpoint de quotes."""

    settings = AppSettings()
    user_env = get_user_env_file()

    table = Table(title="quotecard Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", Text(settings.base_url))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Default quote id", "OK", str(settings.default_quote_id))
    table.add_row("User config", "OK" if user_env.exists() else "NONE", Text(str(user_env)))

    ok_http, detail_http = asyncio.run(_check_quote_endpoint(settings))
    table.add_row("Quote endpoint", "OK" if ok_http else "FAIL", Text(detail_http))

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="set-base-url")
def set_base_url(
    base_url: str = typer.Argument(..., help="Base URL serving GET /quotes/{id}."),
) -> None:
    """Guarda la base URL en el .env global del usuario."""

    base_url = base_url.strip().rstrip("/")
    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base_url must start with http:// or https://")

    env_path = write_user_env_vars({"QUOTECARD_BASE_URL": base_url})
    _console.print("[green]Saved base URL to:[/green]", Text(str(env_path)))
