"""Presenter de quotes: dueño de la máquina de estados de la vista.

Flujo por cada llamada a `fetch_quote`:

1. `Loading` se publica de forma síncrona, antes de retornar.
2. Una task de asyncio espera `QuoteRepository.get_quote`.
3. La task publica exactamente uno de `Success` o `Error`.

Por qué un número de generación:
- Cada llamada toma una generación nueva y la task solo publica si sigue
  siendo la última y el presenter no se cerró. Una respuesta lenta de una
  llamada anterior nunca pisa un resultado más nuevo, y nada se publica
  después del teardown.
"""

from __future__ import annotations

import asyncio

import structlog

from core.domain.view_state import Error, Loading, Success, ViewState
from core.services.quote_repository import QuoteRepository
from core.services.state_channel import StateChannel

logger = structlog.get_logger(__name__)


def error_message(exc: BaseException) -> str:
    """Mensaje para el usuario cuando falla un fetch (nunca vacío)."""

    detail = str(exc).strip() or exc.__class__.__name__
    return f"Error getting quote : {detail}"


class QuotePresenter:
    """Publica las transiciones de `ViewState` de cada fetch.

    El presenter es el único escritor de su `StateChannel`; las vistas se
    suscriben a `presenter.state`.
    """

    def __init__(
        self,
        repository: QuoteRepository,
        *,
        channel: StateChannel[ViewState] | None = None,
    ) -> None:
        self._repository = repository
        self._channel: StateChannel[ViewState] = channel or StateChannel(Loading())
        self._generation = 0
        self._closed = False
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> StateChannel[ViewState]:
        return self._channel

    def fetch_quote(self, quote_id: int) -> None:
        """Arranca un ciclo de fetch para `quote_id` y retorna de inmediato.

        Requiere un event loop corriendo. El resultado solo llega por `state`.

        Raises:
            RuntimeError: Si el presenter está cerrado o no hay loop corriendo.
        """

        if self._closed:
            raise RuntimeError("QuotePresenter is closed")
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        logger.debug("quote_cycle_started", quote_id=quote_id, generation=generation)
        self._channel.publish(Loading())

        task = loop.create_task(
            self._run_cycle(quote_id, generation),
            name=f"quote-fetch-{quote_id}-{generation}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_until_settled(self) -> None:
        """Espera a que terminen (o se cancelen) todos los ciclos en curso."""

        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.wait(pending)
            for task in pending:
                if not task.cancelled() and task.exception() is not None:
                    raise task.exception()  # type: ignore[misc]

    def close(self) -> None:
        """Teardown: cancela los ciclos en curso; después no se publica nada."""

        if self._closed:
            return
        self._closed = True
        for task in list(self._tasks):
            task.cancel()
        logger.debug("quote_presenter_closed", cancelled=len(self._tasks))

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    async def _run_cycle(self, quote_id: int, generation: int) -> None:
        log = logger.bind(quote_id=quote_id, generation=generation)
        state: ViewState
        try:
            quote = await self._repository.get_quote(quote_id)
        except asyncio.CancelledError:
            log.debug("quote_cycle_cancelled")
            raise
        except Exception as exc:
            log.warning("quote_cycle_failed", error=str(exc) or exc.__class__.__name__)
            state = Error(message=error_message(exc))
        else:
            state = Success(quote=quote)

        if not self._is_current(generation):
            log.info("quote_cycle_superseded", latest_generation=self._generation, closed=self._closed)
            return

        log.debug("quote_cycle_settled", kind=state.kind)
        self._channel.publish(state)
