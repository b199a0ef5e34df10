"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El mismo modelo valida y decodifica la respuesta JSON de Petfinder.
- Los campos desconocidos de la API se ignoran (`extra="ignore"`).

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Credentials(BaseModel):
    """Par client id/secret de Petfinder. Se usa una vez por autenticación."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., min_length=1, description="API key (client id).")
    client_secret: str = Field(
        ...,
        min_length=1,
        repr=False,
        description="API secret (client secret).",
    )


class TokenResponse(BaseModel):
    """Cuerpo de la respuesta del endpoint OAuth2 de Petfinder."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., description="Bearer token opaco.")


class Breeds(BaseModel):
    model_config = ConfigDict(extra="ignore")

    primary: str | None = Field(default=None, description="Raza principal.")
    secondary: str | None = Field(default=None, description="Raza secundaria.")


class Listing(BaseModel):
    """Un perro en adopción tal como lo devuelve `GET /animals`.

    Todos los campos son opcionales: la API puede omitirlos o enviar `null`.
    """

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(default=None, description="Identificador Petfinder.")
    name: str | None = Field(default=None, description="Nombre del animal.")
    age: str | None = Field(
        default=None,
        description="Categoría de edad (Baby, Young, Adult, Senior).",
    )
    gender: str | None = Field(default=None, description="Male, Female o Unknown.")
    size: str | None = Field(
        default=None,
        description="Categoría de tamaño (Small, Medium, Large, Extra Large).",
    )
    breeds: Breeds = Field(default_factory=Breeds)
    url: str | None = Field(default=None, description="URL canónica en petfinder.com.")


class ListingCollection(BaseModel):
    """Listados decodificados de una respuesta, en el orden de la API."""

    model_config = ConfigDict(extra="ignore")

    animals: list[Listing] = Field(
        ...,
        description="Array `animals` de la respuesta (puede estar vacío).",
    )

    def __len__(self) -> int:
        return len(self.animals)
