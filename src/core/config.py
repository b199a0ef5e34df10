"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Las credenciales de Petfinder llegan siempre por configuración, nunca como
  constantes en el código.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigError
from core.domain.models import Credentials


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rescue-dogs"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rescue-dogs"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rescue-dogs"
    return Path.home() / ".config" / "rescue-dogs"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# rescue-dogs user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Las credenciales se leen de `RESCUE_DOGS_CLIENT_ID` y
    `RESCUE_DOGS_CLIENT_SECRET` (entorno, `.env` del proyecto o `.env` del
    usuario creado con `rescue-dogs doctor setup`).
    """

    model_config = SettingsConfigDict(
        env_prefix="RESCUE_DOGS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    client_id: str | None = Field(
        default=None,
        description="Petfinder API key (OAuth2 client id).",
    )
    client_secret: str | None = Field(
        default=None,
        description="Petfinder API secret (OAuth2 client secret).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). Vacío = default de httpx.",
    )
    user_agent: str = Field(
        default="rescue-dogs/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )
    organization: str = Field(
        default="OR208",
        min_length=1,
        description="Identificador de la organización de rescate en Petfinder.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    def credentials(self) -> Credentials:
        """Devuelve las credenciales configuradas o lanza `ConfigError`."""

        client_id = (self.client_id or "").strip()
        client_secret = (self.client_secret or "").strip()
        if not client_id or not client_secret:
            raise ConfigError(
                "Missing Petfinder credentials: set RESCUE_DOGS_CLIENT_ID and "
                "RESCUE_DOGS_CLIENT_SECRET or run `rescue-dogs doctor setup`."
            )
        return Credentials(client_id=client_id, client_secret=client_secret)
