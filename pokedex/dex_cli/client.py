"""HTTP client helpers for the Pokédex CLI."""
from __future__ import annotations

import httpx

JSON_HEADERS = {"Accept": "application/json"}


def create_client(
    base_url: str,
    *,
    timeout: float = 10.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Return a JSON-speaking client rooted at the Pokédex API base URL."""

    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        headers=JSON_HEADERS,
        transport=transport,
    )
