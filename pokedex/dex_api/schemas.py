"""Pydantic models for PokeAPI payloads and the Pokédex API surface."""
from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ----------------------------------------------------------------------
# PokeAPI payloads


class PokemonReference(BaseModel):
    """Entry of the list endpoint pointing at a detail record."""

    name: str
    url: str


class PokemonListPayload(BaseModel):
    """Body returned by ``GET /pokemon?limit=N``."""

    results: list[PokemonReference]


class NamedResource(BaseModel):
    name: str


class SpritesPayload(BaseModel):
    front_default: str | None = None


class StatPayload(BaseModel):
    base_stat: int
    stat: NamedResource


class AbilityPayload(BaseModel):
    ability: NamedResource


class TypePayload(BaseModel):
    type: NamedResource


class PokemonDetailPayload(BaseModel):
    """Subset of the PokeAPI detail record consumed by the catalog."""

    id: int = Field(gt=0)
    name: str
    sprites: SpritesPayload = Field(default_factory=SpritesPayload)
    stats: list[StatPayload] = Field(default_factory=list)
    abilities: list[AbilityPayload] = Field(default_factory=list)
    height: int
    weight: int
    types: list[TypePayload] = Field(default_factory=list)

    def to_pokemon(self) -> Pokemon:
        """Flatten the nested upstream shape into a catalog record."""

        return Pokemon(
            id=self.id,
            name=self.name,
            image_url=self.sprites.front_default,
            types=tuple(slot.type.name for slot in self.types),
            stats=tuple((entry.stat.name, entry.base_stat) for entry in self.stats),
            height=self.height,
            weight=self.weight,
            abilities=tuple(slot.ability.name for slot in self.abilities),
        )


# ----------------------------------------------------------------------
# Catalog records


class Pokemon(BaseModel):
    """Immutable catalog record."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    image_url: str | None = None
    types: tuple[str, ...] = ()
    stats: tuple[tuple[str, int], ...] = Field(
        default=(), description="Named base stats as (name, value) pairs in upstream order."
    )
    height: int
    weight: int
    abilities: tuple[str, ...] = ()

    @field_validator("stats", mode="before")
    @classmethod
    def _stats_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @property
    def primary_type(self) -> str | None:
        return self.types[0] if self.types else None

    def stat(self, name: str) -> int | None:
        """Return the base value of ``name`` or ``None`` when the record lacks it."""

        for stat_name, value in self.stats:
            if stat_name == name:
                return value
        return None


# ----------------------------------------------------------------------
# API responses


LoadStatus = Literal["loading", "loaded", "failed"]


class PokemonCardModel(BaseModel):
    """Display-ready representation of a single catalog record."""

    id: int
    name: str
    image_url: str | None = None
    types: list[str] = Field(default_factory=list)
    background_color: str = Field(description="Card colour derived from the primary type.")
    hp: int | None = Field(default=None, description="Base HP, absent when the record has none.")
    height: int = Field(description="Height in decimetres.")
    weight: int = Field(description="Weight in hectograms.")
    abilities: list[str] = Field(default_factory=list)
    stats: dict[str, int] = Field(default_factory=dict)


class ViewStateModel(BaseModel):
    """Snapshot of the filter view exposed by the API."""

    status: LoadStatus
    loading: bool
    error: str | None = Field(
        default=None, description="User-facing message when the last load failed."
    )
    search_term: str = ""
    total: int = Field(default=0, description="Number of records in the loaded catalog.")
    visible_count: int = Field(default=0, description="Number of records matching the search term.")
    items: list[PokemonCardModel] = Field(default_factory=list)


class SearchUpdate(BaseModel):
    """Payload accepted by the search endpoint."""

    term: str = Field(default="", description="Raw search text typed by the user.")


class CatalogHealthStatus(BaseModel):
    """Represents the in-memory catalog state."""

    status: LoadStatus
    size: int = Field(default=0, description="Number of cached catalog records.")
    detail: str | None = Field(
        default=None, description="Optional diagnostic message when the last load failed."
    )


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")
    catalog: CatalogHealthStatus
