"""Construcción de URLs de consulta para `GET /v2/animals`.

Funciones puras: sin red ni I/O. El único input implícito es la hora local,
que se puede inyectar con `now=` para tests.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from urllib.parse import quote_plus

from core.domain.query import DateWindow
from core.log import get_logger

logger = get_logger(__name__)

API_BASE_URL = "https://api.petfinder.com/v2"
ANIMALS_ENDPOINT = f"{API_BASE_URL}/animals"
TOKEN_ENDPOINT = f"{API_BASE_URL}/oauth2/token"
DEFAULT_ORGANIZATION = "OR208"


def base_url(organization: str = DEFAULT_ORGANIZATION) -> str:
    """URL fija: perros en adopción de una organización."""

    return f"{ANIMALS_ENDPOINT}?type=dog&organization={quote_plus(organization)}&status=adoptable"


def window_start(window: DateWindow, now: datetime | None = None) -> datetime:
    """Medianoche local del día `now - window.offset_days`, con tz.

    Con una zona real (`ZoneInfo`) el offset es el vigente a esa medianoche.
    Un `now` con offset fijo no lleva reglas de DST: se conserva su offset.
    """

    if now is None:
        target = date.today() - timedelta(days=window.offset_days)
        # naive -> astimezone() aplica el offset local vigente a esa medianoche
        return datetime(target.year, target.month, target.day).astimezone()

    target = now.date() - timedelta(days=window.offset_days)
    midnight = datetime(target.year, target.month, target.day, tzinfo=now.tzinfo)
    return midnight if now.tzinfo is not None else midnight.astimezone()


def format_after(moment: datetime) -> str:
    """ISO-8601 con offset, p.ej. `2026-10-19T00:00:00-07:00`."""

    return moment.isoformat(timespec="seconds")


def build_window_url(
    window: DateWindow | str,
    *,
    now: datetime | None = None,
    organization: str = DEFAULT_ORGANIZATION,
) -> str:
    """URL con `after=<medianoche local>` para la ventana indicada.

    Una ventana desconocida devuelve la URL base sin `after` (sin error).
    """

    url = base_url(organization)
    try:
        window = DateWindow(window)
    except ValueError:
        logger.debug("Unknown date window %r, returning base URL", window)
        return url

    after = format_after(window_start(window, now))
    return f"{url}&after={quote_plus(after)}"


def build_filtered_url(
    ages: str = "",
    sizes: str = "",
    genders: str = "",
    *,
    organization: str = DEFAULT_ORGANIZATION,
) -> str:
    """URL con `age`, `size` y `gender` (en ese orden) si no están vacíos.

    Cada argumento es la lista ya validada unida por comas; la coma queda
    codificada como `%2C`.
    """

    url = base_url(organization)
    for name, value in (("age", ages), ("size", sizes), ("gender", genders)):
        if value:
            url += f"&{name}={quote_plus(value)}"
    return url
