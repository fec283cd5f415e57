"""Tests for the Rich presentation layer."""

from __future__ import annotations

from rich.console import Console

from cli.quote_view import QuoteView
from cli.ui_components import render_state
from core.domain.models import Quote
from core.domain.view_state import Error, Loading, Success
from core.services.state_channel import StateChannel

QUOTE = Quote(id=1, text="Be yourself.", author="Oscar Wilde")


def _console() -> Console:
    return Console(record=True, width=120, force_terminal=False, color_system=None)


def _render_text(state) -> str:
    console = _console()
    console.print(render_state(state))
    return console.export_text()


def test_render_loading() -> None:
    assert "Loading..." in _render_text(Loading())


def test_render_success_card() -> None:
    text = _render_text(Success(quote=QUOTE))

    assert "“Be yourself.”" in text
    assert "- Oscar Wilde" in text


def test_render_error_verbatim() -> None:
    message = "Error getting quote : HTTP 404 Not Found"

    assert message in _render_text(Error(message=message))


def test_render_is_idempotent() -> None:
    state = Success(quote=QUOTE)

    assert _render_text(state) == _render_text(state)


def test_view_renders_every_transition() -> None:
    console = _console()
    channel = StateChannel(Loading())
    view = QuoteView(console, live=False)

    view.attach(channel)
    channel.publish(Success(quote=QUOTE))
    view.detach()

    text = console.export_text()
    assert text.index("Loading...") < text.index("Be yourself.")


def test_view_attached_late_starts_from_terminal_state() -> None:
    """Replays the terminal state, then re-renders on every publication."""
    console = _console()
    channel = StateChannel(Loading())
    channel.publish(Success(quote=QUOTE))
    view = QuoteView(console, live=False)

    view.attach(channel)
    channel.publish(Success(quote=QUOTE))

    text = console.export_text()
    assert "Loading..." not in text
    assert text.count("Oscar Wilde") == 2


def test_detached_view_ignores_new_states() -> None:
    console = _console()
    channel = StateChannel(Loading())
    view = QuoteView(console, live=False)
    view.attach(channel)
    view.detach()

    channel.publish(Error(message="boom"))

    assert "boom" not in console.export_text()
