"""Shared fixtures faking the PokeAPI endpoints."""
from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

BASE_URL = "https://pokeapi.test/api/v2"


def detail_payload(
    pokemon_id: int,
    name: str,
    *,
    types: list[str] | None = None,
    stats: dict[str, int] | None = None,
    abilities: list[str] | None = None,
    sprite: str | None = "default",
) -> dict[str, Any]:
    """Build a detail record shaped like the PokeAPI response."""

    if sprite == "default":
        sprite = f"https://img.test/{pokemon_id}.png"
    resolved_stats = {"hp": 45, "attack": 49} if stats is None else stats
    return {
        "id": pokemon_id,
        "name": name,
        "sprites": {"front_default": sprite, "back_default": None},
        "stats": [
            {"base_stat": value, "effort": 0, "stat": {"name": stat, "url": "x"}}
            for stat, value in resolved_stats.items()
        ],
        "abilities": [
            {"ability": {"name": ability, "url": "x"}, "is_hidden": False, "slot": 1}
            for ability in (abilities or ["overgrow"])
        ],
        "height": 7,
        "weight": 69,
        "types": [
            {"slot": index + 1, "type": {"name": type_name, "url": "x"}}
            for index, type_name in enumerate(["grass"] if types is None else types)
        ],
        "base_experience": 64,
    }


@dataclass
class FakePokeApi:
    """In-memory stand-in for the list and detail endpoints."""

    details: list[dict[str, Any]] = field(default_factory=list)
    failing: dict[str, int] = field(default_factory=dict)
    raw_bodies: dict[str, str] = field(default_factory=dict)
    delays: dict[str, float] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    completed: list[str] = field(default_factory=list)
    list_status: int = 200

    def detail_url(self, name: str) -> str:
        return f"{BASE_URL}/pokemon/{name}/"

    def add(self, pokemon_id: int, name: str, **kwargs: Any) -> None:
        self.details.append(detail_payload(pokemon_id, name, **kwargs))

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if request.url.path.rstrip("/") == "/api/v2/pokemon":
            if self.list_status != 200:
                return httpx.Response(self.list_status, json={"detail": "boom"})
            results = [
                {"name": item["name"], "url": self.detail_url(item["name"])}
                for item in self.details
            ]
            return httpx.Response(200, json={"count": len(results), "results": results})

        name = request.url.path.rstrip("/").rsplit("/", 1)[-1]
        delay = self.delays.get(name)
        if delay:
            await asyncio.sleep(delay)
        self.completed.append(name)
        if name in self.failing:
            return httpx.Response(self.failing[name], json={"detail": "boom"})
        if name in self.raw_bodies:
            return httpx.Response(200, text=self.raw_bodies[name])
        for item in self.details:
            if item["name"] == name:
                return httpx.Response(200, json=item)
        return httpx.Response(404, text=f"Not found: {url}")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture()
def fake_api() -> FakePokeApi:
    api = FakePokeApi()
    api.add(1, "bulbasaur", types=["grass", "poison"])
    api.add(2, "ivysaur", types=["grass", "poison"])
    api.add(4, "charmander", types=["fire"], abilities=["blaze", "solar-power"])
    return api
