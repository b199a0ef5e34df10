"""Errores del dominio.

Dos ejes:
- Tipo de fallo: `TransportError`, `HTTPStatusError`, `DecodeError`.
- Operación: `AuthError` (token) y `FetchError` (listados).

Las clases concretas combinan ambos ejes, así el llamador puede capturar por
operación (`except AuthError`) o por tipo (`except HTTPStatusError`).
"""

from __future__ import annotations


class RescueDogsError(Exception):
    """Raíz de todos los errores de la aplicación."""


class ConfigError(RescueDogsError):
    """Configuración incompleta (p.ej. faltan credenciales)."""


class TransportError(RescueDogsError):
    """Fallo de red/conexión antes de obtener respuesta."""


class HTTPStatusError(RescueDogsError):
    """La API respondió con un status distinto de 200."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(RescueDogsError):
    """El cuerpo no es JSON válido o no tiene la forma esperada."""


class AuthError(RescueDogsError):
    """Fallo al obtener el access token."""


class FetchError(RescueDogsError):
    """Fallo al obtener los listados."""


class AuthTransportError(AuthError, TransportError):
    pass


class AuthStatusError(AuthError, HTTPStatusError):
    pass


class AuthDecodeError(AuthError, DecodeError):
    pass


class FetchTransportError(FetchError, TransportError):
    pass


class FetchStatusError(FetchError, HTTPStatusError):
    pass


class FetchDecodeError(FetchError, DecodeError):
    pass
