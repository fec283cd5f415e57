"""Tests for the HTTP fetch client and the client builder."""

from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from adapters.http_client import build_async_client
from adapters.quote_api import QuoteApiClient
from core.config import AppSettings
from core.domain.models import RemoteQuote
from core.errors import QuoteFetchError
from fakes import BASE_URL


@pytest.mark.asyncio
async def test_fetch_by_id_success(http_client: httpx.AsyncClient, respx_mock: MockRouter) -> None:
    """Parse the wire body into a RemoteQuote."""
    route = respx_mock.get(f"{BASE_URL}/quotes/1").mock(
        return_value=httpx.Response(
            200,
            json={"id": 1, "quote": "Be yourself.", "author": "Oscar Wilde"},
        )
    )

    remote = await QuoteApiClient(http_client).fetch_by_id(1)

    assert remote == RemoteQuote(id=1, text="Be yourself.", author="Oscar Wilde")
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_fetch_by_id_http_error_status(http_client: httpx.AsyncClient, respx_mock: MockRouter) -> None:
    """Non-2xx responses become QuoteFetchError carrying the status."""
    respx_mock.get(f"{BASE_URL}/quotes/999").mock(
        return_value=httpx.Response(404, json={"message": "Quote with id '999' not found"})
    )

    with pytest.raises(QuoteFetchError) as exc_info:
        await QuoteApiClient(http_client).fetch_by_id(999)

    assert str(exc_info.value) == "HTTP 404 Not Found"
    assert exc_info.value.status_code == 404
    assert exc_info.value.quote_id == 999
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_fetch_by_id_transport_error(http_client: httpx.AsyncClient, respx_mock: MockRouter) -> None:
    """Connection failures become QuoteFetchError without a status."""
    respx_mock.get(f"{BASE_URL}/quotes/1").mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(QuoteFetchError, match="connection refused") as exc_info:
        await QuoteApiClient(http_client).fetch_by_id(1)

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_fetch_by_id_timeout(http_client: httpx.AsyncClient, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/quotes/1").mock(side_effect=httpx.ReadTimeout("read timed out"))

    with pytest.raises(QuoteFetchError, match="Request timed out: read timed out"):
        await QuoteApiClient(http_client).fetch_by_id(1)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"id": 1, "author": "Oscar Wilde"}),
        httpx.Response(200, json=["not", "an", "object"]),
    ],
)
async def test_fetch_by_id_invalid_body(
    http_client: httpx.AsyncClient, respx_mock: MockRouter, response: httpx.Response
) -> None:
    """Unparseable or incomplete bodies become QuoteFetchError."""
    respx_mock.get(f"{BASE_URL}/quotes/1").mock(return_value=response)

    with pytest.raises(QuoteFetchError, match="Invalid quote payload") as exc_info:
        await QuoteApiClient(http_client).fetch_by_id(1)

    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
async def test_build_async_client_uses_settings(respx_mock: MockRouter) -> None:
    """The builder applies base URL, timeout and headers from settings."""
    settings = AppSettings(
        _env_file=None,
        base_url=BASE_URL,
        http_timeout_seconds=3.5,
        user_agent="quotecard-tests",
    )
    route = respx_mock.get(f"{BASE_URL}/quotes/5").mock(
        return_value=httpx.Response(200, json={"id": 5, "quote": "Q", "author": "A"})
    )

    async with build_async_client(settings) as client:
        assert client.timeout.read == 3.5
        remote = await QuoteApiClient(client).fetch_by_id(5)

    request = route.calls.last.request
    assert request.headers["User-Agent"] == "quotecard-tests"
    assert request.headers["Accept"] == "application/json"
    assert remote.id == 5
