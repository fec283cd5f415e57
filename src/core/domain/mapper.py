"""Traducción wire -> dominio.

Único punto de contacto entre `RemoteQuote` y `Quote`.
"""

from __future__ import annotations

from core.domain.models import Quote, RemoteQuote


def to_domain(remote: RemoteQuote) -> Quote:
    """Convierte el DTO remoto en el modelo de dominio (copia campo a campo)."""

    return Quote(
        id=remote.id,
        text=remote.text,
        author=remote.author,
    )
