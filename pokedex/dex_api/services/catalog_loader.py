"""PokeAPI catalog loader."""
from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urljoin

import httpx
from pydantic import ValidationError

from ..schemas import Pokemon, PokemonDetailPayload, PokemonListPayload, PokemonReference
from ..settings import DexSettings

logger = logging.getLogger(__name__)

Catalog = tuple[Pokemon, ...]


class CatalogLoadError(RuntimeError):
    """Raised when the catalog cannot be loaded as a whole."""


class TransientNetworkError(CatalogLoadError):
    """Raised when PokeAPI is unreachable or answers with a non-success status."""


class MalformedResponseError(CatalogLoadError):
    """Raised when PokeAPI returns a payload of unexpected shape."""


class CatalogLoader:
    """Fetch the reference index and every detail record in one all-or-nothing pass."""

    def __init__(
        self,
        *,
        base_url: str,
        limit: int = 1000,
        timeout: float = 10.0,
        max_connections: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._limit = limit
        self._timeout = timeout
        self._max_connections = max_connections
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: DexSettings, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> CatalogLoader:
        return cls(
            base_url=settings.pokeapi_base_url,
            limit=settings.list_limit,
            timeout=settings.request_timeout,
            max_connections=settings.max_connections,
            transport=transport,
        )

    def _build_url(self, path: str) -> str:
        normalized_base = self._base_url.rstrip("/") + "/"
        return urljoin(normalized_base, path)

    def _create_client(self) -> httpx.AsyncClient:
        limits = httpx.Limits(
            max_connections=self._max_connections,
            max_keepalive_connections=self._max_connections,
        )
        return httpx.AsyncClient(timeout=self._timeout, limits=limits, transport=self._transport)

    async def load(self) -> Catalog:
        """Return the full catalog in list order, raising ``CatalogLoadError`` on any failure."""

        logger.info("Loading catalog from %s (limit=%d)", self._base_url, self._limit)
        async with self._create_client() as client:
            references = await self.fetch_references(client)
            logger.info("Fetched %d references, requesting details", len(references))

            tasks = [
                asyncio.create_task(self.fetch_detail(client, reference))
                for reference in references
            ]
            try:
                catalog = tuple(await asyncio.gather(*tasks))
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        logger.info("Loaded %d catalog records", len(catalog))
        return catalog

    async def fetch_references(self, client: httpx.AsyncClient) -> list[PokemonReference]:
        payload = await self._get_json(
            client, self._build_url("pokemon"), params={"limit": self._limit}
        )
        try:
            return PokemonListPayload.model_validate(payload).results
        except ValidationError as exc:
            raise MalformedResponseError(f"Unexpected list payload: {exc}") from exc

    async def fetch_detail(
        self, client: httpx.AsyncClient, reference: PokemonReference
    ) -> Pokemon:
        payload = await self._get_json(client, reference.url)
        try:
            return PokemonDetailPayload.model_validate(payload).to_pokemon()
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected detail payload for {reference.name!r}: {exc}"
            ) from exc

    async def _get_json(
        self, client: httpx.AsyncClient, url: str, *, params: dict[str, Any] | None = None
    ) -> Any:
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransientNetworkError(
                f"PokeAPI responded with HTTP {exc.response.status_code} for {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransientNetworkError(f"Failed to contact PokeAPI at {url}: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"PokeAPI returned invalid JSON for {url}") from exc
