"""CLI de quotecard (Typer + Rich).

Por qué la CLI es delgada:
- Solo arma las dependencias (cliente HTTP -> repositorio -> presenter) y
  conecta la vista; la lógica de estados vive en `core.services`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from adapters.http_client import build_async_client
from adapters.json_exporter import export_quote_json
from adapters.quote_api import QuoteApiClient
from cli.doctor import app as doctor_app
from cli.quote_view import QuoteView
from cli.ui_components import print_banner
from core.config import AppSettings
from core.domain.view_state import Success, ViewState
from core.logging_setup import configure_logging
from core.services.quote_presenter import QuotePresenter
from core.services.quote_repository import QuoteRepository

app = typer.Typer(no_args_is_help=True, help="Fetch a quote over HTTP and render it in the terminal.")
app.add_typer(doctor_app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override QUOTECARD_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """quotecard: trae y muestra quotes."""

    settings = AppSettings()
    configure_logging(log_level or settings.log_level, settings.log_format)


async def run_fetch_cycle(
    *,
    settings: AppSettings,
    quote_id: int,
    console: Console,
) -> ViewState:
    """Corre un ciclo de fetch con la vista conectada y devuelve el estado final."""

    async with build_async_client(settings) as client:
        presenter = QuotePresenter(QuoteRepository(QuoteApiClient(client)))
        view = QuoteView(console)
        try:
            presenter.fetch_quote(quote_id)
            view.attach(presenter.state)
            await presenter.wait_until_settled()
        finally:
            view.detach()
            presenter.close()
        return presenter.state.value


@app.command()
def show(
    quote_id: int | None = typer.Argument(
        None,
        min=0,
        help="Quote id to fetch (default: QUOTECARD_DEFAULT_QUOTE_ID).",
    ),
    json_path: Path | None = typer.Option(
        None,
        "--json",
        help="Also write the fetched quote to this JSON file.",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Trae un quote y muestra loading, la tarjeta o el error."""

    settings = AppSettings()
    target = settings.default_quote_id if quote_id is None else quote_id

    if not no_banner:
        print_banner(_console)

    final_state = asyncio.run(run_fetch_cycle(settings=settings, quote_id=target, console=_console))

    if not isinstance(final_state, Success):
        raise typer.Exit(code=1)

    if json_path is not None:
        written = export_quote_json(quote=final_state.quote, output_path=json_path)
        _console.print("[green]Saved JSON to:[/green]", Text(str(written)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
