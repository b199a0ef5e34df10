from __future__ import annotations

from typing import Callable

import httpx
import pytest

from adapters.http_client import build_client
from core.config import AppSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """No real credentials or `.env` files leak into tests."""

    for key in (
        "RESCUE_DOGS_CLIENT_ID",
        "RESCUE_DOGS_CLIENT_SECRET",
        "RESCUE_DOGS_ORGANIZATION",
        "RESCUE_DOGS_HTTP_TIMEOUT_SECONDS",
        "RESCUE_DOGS_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(client_id="test-id", client_secret="test-secret", _env_file=None)


@pytest.fixture
def mock_client(settings: AppSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Build an `httpx.Client` whose requests are answered by `handler`."""

    clients: list[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = build_client(settings, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
