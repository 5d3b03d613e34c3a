"""Transform PokeAPI /pokemon responses into Pokémon records."""

from typing import Optional, List

from ..utils.typing import PokemonPayload, PokemonRecord, TypeTag
from .species_name import normalize_species_name

# Positional order of PokeAPI's stats array
STAT_KEYS = (
    "hp",
    "attack",
    "defense",
    "special_attack",
    "special_defense",
    "speed",
)


def build_bulbapedia_url(name: str, base_url: str) -> str:
    """Build the Bulbapedia article URL; only the first space becomes an underscore."""
    return f"{base_url}/wiki/{name.replace(' ', '_', 1)}_(Pokémon)"


def extract_types(payload: PokemonPayload) -> List[TypeTag]:
    """Type names in source order."""
    return [{"name": entry["type"]["name"]} for entry in payload["types"]]


def official_artwork(payload: PokemonPayload) -> Optional[str]:
    return payload["sprites"]["other"]["official-artwork"]["front_default"]


def choose_sprite(payload: PokemonPayload) -> Optional[str]:
    """Front sprite, falling back to the official artwork when there is none."""
    return payload["sprites"]["front_default"] or official_artwork(payload)


def parse_pokemon(payload: PokemonPayload, bulbapedia_base_url: str) -> PokemonRecord:
    """
    Normalize a /pokemon/{id} payload.
    
    Args:
        payload: Decoded JSON response
        bulbapedia_base_url: Base URL for the reference link
        
    Returns:
        Record without the species enrichment fields
        
    Raises:
        KeyError, IndexError, TypeError: If the payload is missing expected fields
    """
    name = normalize_species_name(payload["species"]["name"])
    stats = payload["stats"]
    
    record: PokemonRecord = {
        "number": payload["id"],
        "name": name,
        "types": extract_types(payload),
        "height": payload["height"],
        "weight": payload["weight"],
        "sprite": choose_sprite(payload),
        "artwork": official_artwork(payload),
        "bulbapedia_url": build_bulbapedia_url(name, bulbapedia_base_url),
    }
    # stat.name is ignored on purpose; PokeAPI's order is the contract
    for position, key in enumerate(STAT_KEYS):
        record[key] = stats[position]["base_stat"]
    
    return record
