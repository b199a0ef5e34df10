"""Contrato para obtener listados.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- `adapters.petfinder.fetch_listings` lo cumple tal cual; los tests pasan
  funciones fake con la misma firma.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ListingCollection


@runtime_checkable
class ListingFetcher(Protocol):
    """Obtiene y decodifica los listados de una URL ya construida.

    Reglas:
    - Una sola petición por llamada, sin reintentos.
    - Lanza `FetchError` si falla; una colección vacía NO es un error.
    """

    def __call__(self, url: str, token: str) -> ListingCollection:
        ...
