"""CLI principal (Typer).

Comandos:
- `search`: busca perros en adopción (hoy, últimos 3 días, o con filtros).
- `doctor`: diagnóstico y configuración de credenciales.
"""

from __future__ import annotations

from functools import partial

import typer
from rich.console import Console
from rich.markup import escape

from adapters.petfinder import authenticate, fetch_listings
from cli.doctor import app as doctor_app
from cli.ui_components import (
    build_filter_options_panel,
    print_banner,
    render_listings,
    render_results_json,
)
from core.config import AppSettings
from core.domain.errors import AuthError, ConfigError
from core.domain.query import DateWindow, FilterSelection
from core.log import configure_logging, get_logger
from core.services.listing_pipeline import (
    PipelineHooks,
    QueryMode,
    QueryResult,
    filtered_query,
    run_queries,
    window_query,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Adoptable dogs from a Petfinder rescue organization.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)

USAGE = """Usage:
  rescue-dogs search [options]
  --today
\tFetch dogs posted today
  --3days
\tFetch dogs posted in the last 3 days
  --filter
\tFilter dogs based on options"""


def _prompt_filter_options(
    age: str | None,
    size: str | None,
    gender: str | None,
) -> FilterSelection:
    """Pregunta por cada categoría que no llegó por opción."""

    print_banner(_err_console)
    _err_console.print(build_filter_options_panel())

    def ask(category: str, given: str | None) -> str:
        if given is not None:
            return given
        return typer.prompt(
            f"Enter {category} options",
            default="",
            show_default=False,
            err=True,
        )

    return FilterSelection.parse(
        ask("Age", age),
        ask("Size", size),
        ask("Gender", gender),
    )


@app.command()
def search(
    today: bool = typer.Option(False, "--today", help="Fetch dogs posted today."),
    three_days: bool = typer.Option(
        False, "--3days", help="Fetch dogs posted in the last 3 days."
    ),
    use_filter: bool = typer.Option(
        False, "--filter", help="Filter dogs by age, size and gender (prompts)."
    ),
    age: str | None = typer.Option(
        None, "--age", help="Comma-separated: baby, young, adult, senior."
    ),
    size: str | None = typer.Option(
        None, "--size", help="Comma-separated: small, medium, large, xlarge."
    ),
    gender: str | None = typer.Option(
        None, "--gender", help="Comma-separated: male, female."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print listings as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Fetch and print adoptable dogs."""

    filter_given = any(value is not None for value in (age, size, gender))
    if not (today or three_days or use_filter or filter_given):
        _console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        credentials = settings.credentials()
    except ConfigError as exc:
        _err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    try:
        token = authenticate(
            credentials.client_id,
            credentials.client_secret,
            settings=settings,
        )
    except AuthError as exc:
        _err_console.print(f"[red]Authentication failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    modes: list[QueryMode] = []
    if today:
        modes.append(window_query(DateWindow.TODAY, organization=settings.organization))
    if three_days:
        modes.append(
            window_query(DateWindow.LAST_3_DAYS, organization=settings.organization)
        )
    if use_filter or filter_given:
        if use_filter:
            selection = _prompt_filter_options(age, size, gender)
        else:
            selection = FilterSelection.parse(age, size, gender)
        modes.append(filtered_query(selection, organization=settings.organization))

    logger.debug("Running %d query mode(s)", len(modes))

    # En modo JSON el stdout queda solo para los datos.
    status_console = _err_console if as_json else _console

    def on_start(mode: QueryMode) -> None:
        status_console.print(mode.start_message, markup=False, highlight=False, soft_wrap=True)

    def on_warning(message: str) -> None:
        status_console.print(message, markup=False, highlight=False, soft_wrap=True)

    def on_finished(outcome: QueryResult) -> None:
        # JSON se imprime una sola vez al final
        if outcome.listings is None or as_json:
            return
        render_listings(_console, outcome.listings, empty_message=outcome.mode.empty_message)

    result = run_queries(
        modes,
        token,
        fetch=partial(fetch_listings, settings=settings),
        hooks=PipelineHooks(start=on_start, warning=on_warning, finished=on_finished),
    )

    if as_json:
        render_results_json(
            _console,
            {r.mode.name: r.listings for r in result.results if r.listings is not None},
        )


def run() -> None:
    app()
