"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El repositorio depende de `QuoteFetcher`, no de httpx.
"""

from core.interfaces.quote_fetcher import QuoteFetcher

__all__ = ["QuoteFetcher"]
