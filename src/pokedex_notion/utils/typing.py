"""Type definitions for the application."""

from typing import TypedDict, Optional, Dict, Any, List


class TypeTag(TypedDict):
    """A Pokémon type in the shape Notion expects for multi_select options."""
    name: str


class _PokemonRecordBase(TypedDict):
    number: int
    name: str
    types: List[TypeTag]
    height: int
    weight: int
    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int
    sprite: Optional[str]
    artwork: Optional[str]
    bulbapedia_url: str


class PokemonRecord(_PokemonRecordBase, total=False):
    """Normalized Pokémon record.

    The enrichment keys are absent until the species lookup succeeds.
    """
    flavor_text: str
    category: str
    generation: str


class SpeciesDetails(TypedDict):
    """Fields extracted from a pokemon-species response."""
    flavor_text: str
    category: str
    generation: str


class PokemonPayload(TypedDict, total=False):
    """PokeAPI /pokemon/{id} response (only the fields we read)."""
    id: int
    types: List[Dict[str, Any]]
    species: Dict[str, Any]
    sprites: Dict[str, Any]
    height: int
    weight: int
    stats: List[Dict[str, Any]]


class SpeciesPayload(TypedDict, total=False):
    """PokeAPI /pokemon-species/{id} response (only the fields we read)."""
    flavor_text_entries: List[Dict[str, Any]]
    genera: List[Dict[str, Any]]
    generation: Dict[str, Any]
