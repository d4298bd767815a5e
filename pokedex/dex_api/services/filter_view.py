"""In-memory catalog state with a derived, searchable visible subset."""
from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from ..schemas import LoadStatus, Pokemon
from .catalog_loader import Catalog, CatalogLoader, CatalogLoadError

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "The Pokémon catalog could not be loaded."


def filter_catalog(catalog: Iterable[Pokemon], search_term: str) -> tuple[Pokemon, ...]:
    """Return records whose lowercase name contains the lowercase term, in catalog order."""

    needle = search_term.lower()
    return tuple(pokemon for pokemon in catalog if needle in pokemon.name.lower())


class FilterView:
    """Owns the loaded catalog, the search term and the visible subset.

    State only changes through ``apply_result``, ``apply_failure`` and
    ``set_search_term``. ``mount``/``unmount`` tie the loader run to the
    lifetime of the owning application.
    """

    def __init__(self, loader: CatalogLoader) -> None:
        self._loader = loader
        self._status: LoadStatus = "loading"
        self._error: str | None = None
        self._search_term = ""
        self._catalog: Catalog = ()
        self._visible: tuple[Pokemon, ...] = ()
        self._task: asyncio.Task[None] | None = None
        self._generation = 0

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status == "loading"

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def visible(self) -> tuple[Pokemon, ...]:
        return self._visible

    def get(self, pokemon_id: int) -> Pokemon | None:
        for pokemon in self._catalog:
            if pokemon.id == pokemon_id:
                return pokemon
        return None

    # ------------------------------------------------------------------
    # Transitions

    def set_search_term(self, term: str) -> None:
        self._search_term = term.lower()
        self._visible = filter_catalog(self._catalog, self._search_term)

    def apply_result(self, catalog: Catalog) -> None:
        self._catalog = tuple(catalog)
        self._status = "loaded"
        self._error = None
        self._visible = filter_catalog(self._catalog, self._search_term)

    def apply_failure(self, exc: CatalogLoadError) -> None:
        logger.error("Error fetching Pokémon data: %s", exc)
        self._catalog = ()
        self._visible = ()
        self._status = "failed"
        self._error = LOAD_FAILED_MESSAGE

    # ------------------------------------------------------------------
    # Lifecycle

    def _begin_load(self) -> int:
        self._generation += 1
        self._status = "loading"
        self._error = None
        return self._generation

    def _is_current(self, generation: int) -> bool:
        if generation == self._generation:
            return True
        logger.info("Discarding result of superseded catalog load #%d", generation)
        return False

    async def _run_load(self) -> None:
        generation = self._begin_load()
        try:
            catalog = await self._loader.load()
        except CatalogLoadError as exc:
            if self._is_current(generation):
                self.apply_failure(exc)
            return
        if self._is_current(generation):
            self.apply_result(catalog)

    def mount(self) -> asyncio.Task[None]:
        """Start the catalog load in the background, once per mount."""

        if self._task is None:
            self._task = asyncio.create_task(self._run_load(), name="pokedex-catalog-load")
        return self._task

    async def unmount(self) -> None:
        """Cancel an in-flight load and wait for it to unwind."""

        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.info("In-flight catalog load cancelled")

    async def wait_settled(self) -> None:
        if self._task is not None:
            await asyncio.shield(self._task)

    async def reload(self) -> None:
        """Run a fresh load and replace the catalog wholesale.

        Only the most recently started load publishes its outcome; a load
        overtaken by a newer one returns without touching the view. Raises
        ``CatalogLoadError`` after recording the failed state.
        """

        await self.unmount()
        generation = self._begin_load()
        try:
            catalog = await self._loader.load()
        except CatalogLoadError as exc:
            if not self._is_current(generation):
                return
            self.apply_failure(exc)
            raise
        if self._is_current(generation):
            self.apply_result(catalog)
