"""Shared fixtures: PokeAPI payload factories, fake transports, recording sleep."""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

STAT_NAMES = ["hp", "attack", "defense", "special-attack", "special-defense", "speed"]


def make_pokemon_payload(
    pokemon_id: int = 4,
    slug: str = "charmander",
    types: Optional[List[str]] = None,
    front_default: Optional[str] = "https://img.example/sprites/4.png",
    artwork: Optional[str] = "https://img.example/artwork/4.png",
    base_stats: Optional[List[int]] = None,
    height: int = 6,
    weight: int = 85,
) -> Dict[str, Any]:
    types = types if types is not None else ["fire"]
    base_stats = base_stats or [39, 52, 43, 60, 50, 65]
    return {
        "id": pokemon_id,
        "species": {"name": slug, "url": f"https://pokeapi.co/api/v2/pokemon-species/{pokemon_id}/"},
        "types": [
            {"slot": slot, "type": {"name": name, "url": "https://pokeapi.co/api/v2/type/x/"}}
            for slot, name in enumerate(types, start=1)
        ],
        "sprites": {
            "front_default": front_default,
            "other": {"official-artwork": {"front_default": artwork}},
        },
        "height": height,
        "weight": weight,
        "stats": [
            {"base_stat": value, "effort": 0, "stat": {"name": STAT_NAMES[i]}}
            for i, value in enumerate(base_stats)
        ],
    }


def make_species_payload(
    flavor_text: str = "Obviously prefers\nhot places. When\fit rains, steam\ris said to spout.",
    genus: str = "Lizard Pokémon",
    generation: str = "generation-i",
    include_english: bool = True,
) -> Dict[str, Any]:
    flavor_entries = [
        {"flavor_text": "Il préfère les endroits chauds.", "language": {"name": "fr"}},
    ]
    genera = [{"genus": "Pokémon Lézard", "language": {"name": "fr"}}]
    if include_english:
        flavor_entries.append({"flavor_text": flavor_text, "language": {"name": "en"}})
        flavor_entries.append({"flavor_text": "Second English entry.", "language": {"name": "en"}})
        genera.append({"genus": genus, "language": {"name": "en"}})
    return {
        "flavor_text_entries": flavor_entries,
        "genera": genera,
        "generation": {"name": generation},
    }


class FakeAPIs:
    """Routes PokeAPI and Notion requests to in-memory fixtures."""

    def __init__(self):
        self.pokemon: Dict[int, Dict[str, Any]] = {}
        self.species: Dict[int, Dict[str, Any]] = {}
        self.created_pages: List[Dict[str, Any]] = []
        self.requests: List[httpx.Request] = []
        self.page_failures: Dict[str, int] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.startswith("/api/v2/pokemon/"):
            return self._lookup(self.pokemon, path)
        if path.startswith("/api/v2/pokemon-species/"):
            return self._lookup(self.species, path)
        if path == "/v1/pages" and request.method == "POST":
            page = json.loads(request.content)
            name = page["properties"]["Name"]["title"][0]["text"]["content"]
            if name in self.page_failures:
                return httpx.Response(
                    self.page_failures[name],
                    json={"object": "error", "code": "validation_error", "message": "bad page"},
                )
            self.created_pages.append(page)
            page_id = f"page-{len(self.created_pages)}"
            return httpx.Response(
                200, json={"object": "page", "id": page_id, "url": f"https://www.notion.so/{page_id}"}
            )
        return httpx.Response(404, text="Not Found")

    @staticmethod
    def _lookup(table: Dict[int, Dict[str, Any]], path: str) -> httpx.Response:
        key = int(path.rstrip("/").rsplit("/", 1)[-1])
        if key not in table:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, json=table[key])

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport())


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays instead of waiting."""

    def __init__(self, on_sleep: Optional[Callable[[], None]] = None):
        self.calls: List[float] = []
        self.on_sleep = on_sleep

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self.on_sleep:
            self.on_sleep()


@pytest.fixture
def fake_apis() -> FakeAPIs:
    return FakeAPIs()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def pokemon_payload() -> Dict[str, Any]:
    return make_pokemon_payload()


@pytest.fixture
def species_payload() -> Dict[str, Any]:
    return make_species_payload()
