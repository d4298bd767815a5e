"""Runtime configuration for the Pokédex API."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DexSettings(BaseSettings):
    """Environment-aware settings for the Pokédex API service."""

    pokeapi_base_url: str = Field(
        "https://pokeapi.co/api/v2", description="Base URL for the PokeAPI REST service."
    )
    list_limit: int = Field(
        default=1000,
        ge=1,
        description="Upper bound of references requested from the list endpoint.",
    )
    request_timeout: float = Field(
        default=10.0, gt=0, description="Timeout in seconds applied to every PokeAPI request."
    )
    max_connections: int | None = Field(
        default=None,
        ge=1,
        description="Optional cap on concurrent PokeAPI connections (unbounded when unset).",
    )
    load_on_startup: bool = Field(
        default=True, description="Whether the catalog load starts with the application."
    )
    host: str = Field(default="0.0.0.0", description="Interface the development server binds.")
    port: int = Field(default=8000, description="Port the development server listens on.")
    log_level: str = Field(default="INFO", description="Root logging level for the service.")

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
