"""Repositorio: cliente de fetch + mapper detrás de una única llamada de dominio."""

from __future__ import annotations

from core.domain.mapper import to_domain
from core.domain.models import Quote
from core.interfaces.quote_fetcher import QuoteFetcher


class QuoteRepository:
    """Devuelve quotes de dominio; los fallos del fetcher se propagan sin tocar.

    Sin cache ni deduplicación: cada llamada hace su propio request.
    """

    def __init__(self, fetcher: QuoteFetcher) -> None:
        self._fetcher = fetcher

    async def get_quote(self, quote_id: int) -> Quote:
        remote = await self._fetcher.fetch_by_id(quote_id)
        return to_domain(remote)
