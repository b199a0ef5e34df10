"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from adapters.petfinder import authenticate
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import ConfigError, RescueDogsError
from core.services.query_urls import API_BASE_URL

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_auth(settings: AppSettings) -> tuple[str, str]:
    try:
        credentials = settings.credentials()
    except ConfigError:
        return "SKIPPED", "No credentials configured"
    try:
        authenticate(credentials.client_id, credentials.client_secret, settings=settings)
    except RescueDogsError as exc:
        return "FAIL", str(exc)
    return "OK", "Token issued"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Rescue Dogs Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Client id", "OK" if settings.client_id else "MISSING", "RESCUE_DOGS_CLIENT_ID")
    table.add_row(
        "Client secret",
        "OK" if settings.client_secret else "MISSING",
        "RESCUE_DOGS_CLIENT_SECRET",
    )
    table.add_row("Organization", "OK", settings.organization)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(API_BASE_URL, settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    status_auth, detail_auth = _check_auth(settings)
    table.add_row("Petfinder token", status_auth, detail_auth)

    _console.print(table)

    if status_auth != "OK":
        _console.print(
            "\n[yellow]Note:[/yellow] Get an API key at https://www.petfinder.com/developers/ "
            "and store it with `rescue-dogs doctor setup`."
        )


@app.command()
def setup() -> None:
    """Interactive credential setup (stores config in the user config .env)."""

    client_id = typer.prompt("Petfinder API key").strip()
    client_secret = typer.prompt("Petfinder API secret", hide_input=True, confirmation_prompt=False).strip()

    if not client_id or not client_secret:
        raise typer.BadParameter("API key and secret are required")

    env_path = write_user_env_vars(
        {
            "RESCUE_DOGS_CLIENT_ID": client_id,
            "RESCUE_DOGS_CLIENT_SECRET": client_secret,
        }
    )

    _console.print(f"[green]Saved Petfinder credentials to:[/green] {env_path}")
