"""Command line interface for the Pokédex API."""
from __future__ import annotations

import json
from typing import Any

import httpx
import typer

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8000"

# Reloading fetches every detail record, so it gets a longer timeout.
RELOAD_TIMEOUT = 300.0

app = typer.Typer(help="Browse the Pokédex catalog served by the Pokédex API.")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the Pokédex API service.",
        show_default=True,
        envvar="POKEDEX_API_BASE",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _echo_view(response: httpx.Response, names_only: bool) -> None:
    payload = response.json()
    if names_only:
        for item in payload.get("items", []):
            typer.echo(item["name"])
        return
    _echo_json(payload)


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    with create_client(api_base) as client:
        response = client.get("/health")
        response.raise_for_status()
        _echo_json(response.json())


@app.command()
def view(
    names_only: bool = typer.Option(
        False,
        "--names-only/--full",
        help="Print only the names of visible Pokémon.",
        show_default=True,
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Display the loading state, search term and visible cards."""

    with create_client(api_base) as client:
        response = client.get("/view")
        response.raise_for_status()
        _echo_view(response, names_only)


@app.command()
def search(
    term: str = typer.Argument("", help="Search text matched against Pokémon names."),
    names_only: bool = typer.Option(
        False,
        "--names-only/--full",
        help="Print only the names of visible Pokémon.",
        show_default=True,
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Update the search term and display the matching Pokémon."""

    with create_client(api_base) as client:
        response = client.put("/view/search", json={"term": term})
        response.raise_for_status()
        _echo_view(response, names_only)


@app.command()
def reload(api_base: str = _api_base_option()) -> None:
    """Reload the catalog from PokeAPI via the service."""

    with create_client(api_base, timeout=RELOAD_TIMEOUT) as client:
        response = client.post("/view/reload")
        if response.status_code == 502:
            typer.echo(f"Catalog reload failed: {response.json().get('detail')}", err=True)
            raise typer.Exit(code=1)
        response.raise_for_status()
        _echo_json(response.json())


@app.command()
def show(
    pokemon_id: int = typer.Argument(..., help="Identifier of the Pokémon to display."),
    api_base: str = _api_base_option(),
) -> None:
    """Display the card for a single Pokémon."""

    with create_client(api_base) as client:
        response = client.get(f"/view/pokemon/{pokemon_id}")
        if response.status_code == 404:
            typer.echo("Pokémon not found", err=True)
            raise typer.Exit(code=1)
        response.raise_for_status()
        _echo_json(response.json())
