"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `render_state` es una función pura del `ViewState`: el mismo estado produce
  siempre la misma salida, sin importar cuándo se conectó la vista.
"""

from __future__ import annotations

from rich import box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.spinner import Spinner
from rich.text import Text

from core.domain.models import Quote
from core.domain.view_state import Error, Loading, Success, ViewState


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Permite desactivar banner en modos no interactivos (`--no-banner`).
    """

    title = Text("quotecard", style="bold cyan")
    subtitle = Text("Quotes remotos • Loading / Success / Error", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_loading_indicator() -> RenderableType:
    return Spinner("dots", text=Text("Loading...", style="dim"), style="cyan")


def build_quote_card(quote: Quote) -> Panel:
    """Tarjeta con el texto del quote y el autor alineado a la derecha."""

    body = Group(
        Text(f"“{quote.text}”"),
        Rule(style="dim"),
        Align.right(Text(f"- {quote.author}", style="bold cyan")),
    )
    return Panel(body, box=box.ROUNDED, border_style="cyan", padding=(1, 2))


def build_error_message(message: str) -> Text:
    return Text(message, style="red")


def render_state(state: ViewState) -> RenderableType:
    """Renderable para el estado actual (loading, card o error)."""

    if isinstance(state, Loading):
        return build_loading_indicator()
    if isinstance(state, Success):
        return build_quote_card(state.quote)
    if isinstance(state, Error):
        return build_error_message(state.message)
    raise TypeError(f"Unknown view state: {state!r}")
