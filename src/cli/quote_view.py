"""Vista de terminal conectada al canal de estado del presenter.

Por qué una clase aparte:
- Separa la suscripción (ciclo de vida attach/detach) del render puro de
  `ui_components.render_state`.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.live import Live

from cli.ui_components import render_state
from core.domain.view_state import ViewState
from core.services.state_channel import StateChannel


class QuoteView:
    """Re-renderiza en cada `ViewState` publicado.

    En una terminal interactiva redibuja en el sitio con `rich.live.Live`; si no,
    imprime cada estado a medida que llega.
    """

    def __init__(self, console: Console, *, live: bool | None = None) -> None:
        self._console = console
        self._use_live = console.is_terminal if live is None else live
        self._live: Live | None = None
        self._unsubscribe: Callable[[], None] | None = None

    def attach(self, channel: StateChannel[ViewState]) -> None:
        """Se suscribe a `channel`; el valor actual se renderiza de inmediato."""

        if self._unsubscribe is not None:
            raise RuntimeError("QuoteView is already attached")
        if self._use_live:
            self._live = Live(console=self._console, refresh_per_second=12)
            self._live.start()
        self._unsubscribe = channel.subscribe(self.render)

    def render(self, state: ViewState) -> None:
        renderable = render_state(state)
        if self._live is not None:
            self._live.update(renderable, refresh=True)
        else:
            self._console.print(renderable)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._live is not None:
            self._live.stop()
            self._live = None
