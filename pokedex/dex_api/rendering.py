"""Card and page rendering for catalog records."""
from __future__ import annotations

from html import escape
from typing import Collection, Iterable

from .schemas import Pokemon, PokemonCardModel

TYPE_COLORS: dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}
FALLBACK_COLOR = "#fff"

PAGE_TITLE = "Kanto Region Pokémon"


def type_color(type_name: str | None) -> str:
    """Return the card colour for a type, falling back to white for unknown types."""

    if not type_name:
        return FALLBACK_COLOR
    return TYPE_COLORS.get(type_name, FALLBACK_COLOR)


def build_card(pokemon: Pokemon) -> PokemonCardModel:
    return PokemonCardModel(
        id=pokemon.id,
        name=pokemon.name,
        image_url=pokemon.image_url,
        types=list(pokemon.types),
        background_color=type_color(pokemon.primary_type),
        hp=pokemon.stat("hp"),
        height=pokemon.height,
        weight=pokemon.weight,
        abilities=list(pokemon.abilities),
        stats=dict(pokemon.stats),
    )


def format_stats(stats: dict[str, int]) -> str:
    return ", ".join(f"{name}: {value}" for name, value in stats.items())


def render_card(card: PokemonCardModel, *, hidden: bool = False) -> str:
    hp = "" if card.hp is None else str(card.hp)
    image = ""
    if card.image_url:
        image = f'<img src="{escape(card.image_url)}" alt="{escape(card.name)}" />'
    hidden_attr = " hidden" if hidden else ""
    return (
        f'<div class="card" data-name="{escape(card.name.lower())}"{hidden_attr} '
        f'style="background-color: {card.background_color}">'
        f"{image}"
        f"<h2>{escape(card.name)}</h2>"
        f"<p>ID: {card.id}</p>"
        f"<p>Type: {escape(', '.join(card.types))}</p>"
        f"<p>HP: {hp}</p>"
        f"<p>Height: {card.height} decimetres</p>"
        f"<p>Weight: {card.weight} hectograms</p>"
        f"<p>Abilities: {escape(', '.join(card.abilities))}</p>"
        f"<p>Stats: {escape(format_stats(card.stats))}</p>"
        "</div>"
    )


# Re-filters every card against the box on each keystroke, matching the
# lowercase substring rule of ``filter_catalog``.
FILTER_SCRIPT = (
    "<script>"
    "function filterCards(input) {"
    "var term = input.value.toLowerCase();"
    'document.querySelectorAll(".card").forEach(function (card) {'
    "card.hidden = card.dataset.name.indexOf(term) === -1;"
    "});"
    "}"
    "</script>"
)


def render_page(
    *,
    loading: bool,
    error: str | None,
    search_term: str,
    cards: Iterable[PokemonCardModel],
    visible_ids: Collection[int] | None = None,
) -> str:
    """Render the single page: a loading notice, or search box plus card list.

    Every catalog card is emitted; cards missing from ``visible_ids`` start
    hidden and the browser re-filters them on each input event.
    """

    if loading:
        body = "<div>Loading...</div>"
    else:
        parts = [
            f"<h1>{escape(PAGE_TITLE)}</h1>",
            '<form method="get" action="/">'
            f'<input type="text" name="search" placeholder="Search Pokémon" '
            f'value="{escape(search_term)}" class="search-bar" '
            'oninput="filterCards(this)" autocomplete="off" />'
            "</form>",
        ]
        if error:
            parts.append(f'<p class="error">{escape(error)}</p>')
        parts.append('<div class="flex flex-wrap">')
        parts.extend(
            render_card(card, hidden=visible_ids is not None and card.id not in visible_ids)
            for card in cards
        )
        parts.append("</div>")
        body = '<div class="container">' + "".join(parts) + "</div>" + FILTER_SCRIPT

    return (
        "<!DOCTYPE html>"
        '<html><head><meta charset="utf-8" />'
        f"<title>{escape(PAGE_TITLE)}</title>"
        "</head><body>"
        f"{body}"
        "</body></html>"
    )
