"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza headers y timeout para el token y los listados.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los defaults de la app.

    Sin `http_timeout_seconds` configurado se usa el timeout por defecto de
    httpx (no hay override).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.Client(headers=headers, **kwargs)  # type: ignore[arg-type]


@contextmanager
def open_client(
    client: httpx.Client | None = None,
    settings: AppSettings | None = None,
) -> Iterator[httpx.Client]:
    """Usa el cliente recibido (sin cerrarlo) o crea uno temporal."""

    if client is not None:
        yield client
        return
    with build_client(settings) as owned:
        yield owned
