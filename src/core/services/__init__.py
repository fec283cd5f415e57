"""Servicios del Core: repositorio, canal de estado y presenter.

Orquestan el flujo fetch -> map -> publish sin tocar Rich ni la CLI.
"""

from core.services.quote_presenter import QuotePresenter, error_message
from core.services.quote_repository import QuoteRepository
from core.services.state_channel import StateChannel

__all__ = [
    "QuotePresenter",
    "QuoteRepository",
    "StateChannel",
    "error_message",
]
