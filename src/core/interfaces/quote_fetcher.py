"""Contrato del cliente que trae quotes remotos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El repositorio depende de esta abstracción, así el cliente HTTP real se
  puede sustituir por un fake en tests sin tocar a los llamadores.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import RemoteQuote


@runtime_checkable
class QuoteFetcher(Protocol):
    """Contrato mínimo para traer un quote por id.

    Reglas de diseño:
    - `fetch_by_id` es asíncrono porque hace I/O (HTTP).
    - No valida el id localmente; cualquier fallo se reporta como
      `core.errors.QuoteFetchError`.
    """

    async def fetch_by_id(self, quote_id: int) -> RemoteQuote:
        """Trae el quote `quote_id` tal como lo entrega el servidor."""

        ...
