"""Cliente de la API v2 de Petfinder.

- `auth.authenticate`: OAuth2 client-credentials -> bearer token.
- `animals.fetch_listings`: `GET /animals` -> `ListingCollection`.
"""

from adapters.petfinder.animals import fetch_listings
from adapters.petfinder.auth import authenticate

__all__ = [
	"authenticate",
	"fetch_listings",
]
