"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts y headers en un único punto.
- Facilita testeo: el cliente se construye explícitamente y se inyecta, así
  se puede sustituir por un stub o mockear con respx.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(settings: AppSettings | None = None) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a `settings.base_url`.

    Por qué un builder:
    - No hay singleton global: quien lo crea es dueño de su ciclo de vida
      (`async with build_async_client() as client: ...`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )
