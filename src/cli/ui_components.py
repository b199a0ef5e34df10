"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles y el render de listados en varios comandos.
"""

from __future__ import annotations

import json

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import Listing, ListingCollection
from core.domain.query import AgeOption, GenderOption, SizeOption

SEPARATOR = "-----------------------"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("Rescue Dogs", style="bold cyan")
    subtitle = Text("Adoptable dogs from Petfinder", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_filter_options_panel() -> Panel:
    """Panel con los valores válidos para cada filtro."""

    def _values(options: type) -> str:
        return ", ".join(option.value for option in options)

    body = Text()
    body.append("(Enter none to all for each category)\n\n", style="dim")
    body.append("Age:    ", style="bold")
    body.append(_values(AgeOption) + "\n")
    body.append("Size:   ", style="bold")
    body.append(_values(SizeOption) + "\n")
    body.append("Gender: ", style="bold")
    body.append(_values(GenderOption))
    return Panel(body, title="Filter Options", border_style="cyan", expand=False)


def format_listing(listing: Listing) -> list[str]:
    """Líneas etiquetadas de un listado."""

    breed = listing.breeds.primary or ""
    if listing.breeds.secondary:
        breed = f"{breed} / {listing.breeds.secondary}" if breed else listing.breeds.secondary

    return [
        f"Name: {listing.name or ''}",
        f"Age: {listing.age or ''}",
        f"Gender: {listing.gender or ''}",
        f"Size: {listing.size or ''}",
        f"Breed: {breed}",
        f"URL: {listing.url or ''}",
    ]


def render_listings(
    console: Console,
    collection: ListingCollection,
    *,
    empty_message: str | None = None,
) -> None:
    """Un bloque por listado seguido de un separador.

    Colección vacía: imprime `empty_message` (o nada).
    """

    if len(collection) == 0:
        if empty_message:
            console.print(empty_message, markup=False, highlight=False)
        return

    console.print(SEPARATOR, markup=False, highlight=False)
    for listing in collection.animals:
        for line in format_listing(listing):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        console.print(SEPARATOR, markup=False, highlight=False)


def render_results_json(console: Console, results: dict[str, ListingCollection]) -> None:
    """Un único documento JSON estable (para pipelines), indexado por modo.

    `{"today": {"animals": [...]}, "3days": {...}}`; los modos fallidos no aparecen.
    """

    payload = {name: collection.model_dump(mode="json") for name, collection in results.items()}
    console.print_json(json.dumps(payload, ensure_ascii=False, sort_keys=True))
