"""Excepciones propias del proyecto.

Hay un único tipo de fallo visible, `QuoteFetchError`: el cliente de fetch lo
lanza igual para errores de red, status no-2xx y body inválido.
"""

from __future__ import annotations


class QuoteCardError(Exception):
    """Excepción base de quotecard."""


class QuoteFetchError(QuoteCardError):
    """Falló traer un quote (transporte, status no-2xx o body no parseable).

    Atributos:
        quote_id: Id solicitado.
        status_code: Status HTTP si hubo respuesta, si no `None`.
    """

    def __init__(self, message: str, *, quote_id: int, status_code: int | None = None):
        super().__init__(message)
        self.quote_id = quote_id
        self.status_code = status_code
