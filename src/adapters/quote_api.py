"""Cliente HTTP del endpoint de quotes (`GET /quotes/{id}`).

Todos los fallos (red, status no-2xx, body inválido) salen como
`QuoteFetchError`, con la excepción original encadenada.
"""

from __future__ import annotations

import httpx
import structlog
from pydantic import ValidationError

from core.domain.models import RemoteQuote
from core.errors import QuoteFetchError
from core.interfaces.quote_fetcher import QuoteFetcher

logger = structlog.get_logger(__name__)


class QuoteApiClient(QuoteFetcher):
    """Trae quotes usando un `httpx.AsyncClient` inyectado.

    El cliente inyectado debe tener `base_url` configurado (ver
    `adapters.http_client.build_async_client`).
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_by_id(self, quote_id: int) -> RemoteQuote:
        path = f"/quotes/{quote_id}"
        log = logger.bind(quote_id=quote_id, path=path)
        log.debug("quote_request_started")

        try:
            resp = await self._client.get(path)
        except httpx.HTTPError as exc:
            log.warning("quote_request_failed", error=str(exc) or exc.__class__.__name__)
            raise QuoteFetchError(
                _describe_transport_error(exc),
                quote_id=quote_id,
            ) from exc

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            log.warning("quote_request_failed", status_code=resp.status_code)
            raise QuoteFetchError(
                f"HTTP {resp.status_code} {resp.reason_phrase}".strip(),
                quote_id=quote_id,
                status_code=resp.status_code,
            ) from exc

        try:
            remote = RemoteQuote.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            log.warning("quote_body_invalid", status_code=resp.status_code)
            raise QuoteFetchError(
                f"Invalid quote payload: {exc}",
                quote_id=quote_id,
                status_code=resp.status_code,
            ) from exc

        log.debug("quote_request_succeeded", status_code=resp.status_code)
        return remote


def _describe_transport_error(exc: httpx.HTTPError) -> str:
    detail = str(exc).strip()
    if isinstance(exc, httpx.TimeoutException):
        return f"Request timed out: {detail}" if detail else "Request timed out"
    if detail:
        return detail
    return exc.__class__.__name__
