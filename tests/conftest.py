"""Shared fixtures: a respx-friendly HTTP client and an isolated CLI env."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from fakes import BASE_URL


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx client pointed at the mocked base URL."""
    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        yield client


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run from an empty directory with the base URL pointed at the mock."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("QUOTECARD_BASE_URL", BASE_URL)
    monkeypatch.setattr("core.config.get_user_config_dir", lambda: tmp_path / "config")
