"""The three import stages: primary fetch, species enrichment, publish.

Each stage finishes before the next starts and every request is awaited
before the next one is sent, so records stay in ascending Pokédex order.
"""

from typing import List, Optional

import httpx

from ..exceptions import NotionAPIError, PokedexNotionError
from ..fetchers.notion import NotionClient
from ..fetchers.pokeapi import PokeAPIClient
from ..logging_config import get_logger
from ..parsers.pokemon import parse_pokemon
from ..parsers.species import parse_species
from ..utils.typing import PokemonRecord
from .batch import StageTracker
from .page_builder import build_page
from .rate_limiter import FixedDelayLimiter

logger = get_logger(__name__)

# Transport failures plus payloads that don't have the expected shape
FETCH_ERRORS = (
    httpx.HTTPError,
    PokedexNotionError,
    KeyError,
    IndexError,
    TypeError,
    ValueError,
)

PUBLISH_ERRORS = (httpx.HTTPError, NotionAPIError)


async def fetch_primary_records(
    pokeapi: PokeAPIClient,
    start_id: int,
    end_id: int,
    bulbapedia_base_url: str,
    tracker: Optional[StageTracker] = None,
) -> List[PokemonRecord]:
    """
    Fetch and normalize every Pokémon in ``[start_id, end_id]``.
    
    IDs that fail to fetch or parse are logged and left out.
    """
    records: List[PokemonRecord] = []
    
    for pokemon_id in range(start_id, end_id + 1):
        try:
            payload = await pokeapi.get_pokemon(pokemon_id)
            record = parse_pokemon(payload, bulbapedia_base_url)
        except FETCH_ERRORS as e:
            logger.error(f"Failed to fetch Pokémon #{pokemon_id}: {e!r}")
            if tracker:
                tracker.update(success=False)
            continue
        
        records.append(record)
        logger.debug(f"Fetched #{record['number']} {record['name']}")
        if tracker:
            tracker.update(success=True)
    
    return records


async def enrich_records(
    pokeapi: PokeAPIClient,
    records: List[PokemonRecord],
    tracker: Optional[StageTracker] = None,
) -> List[PokemonRecord]:
    """
    Add flavor text, category and generation to each record in place.
    
    Records whose species lookup fails keep none of the three fields.
    Returns the same list.
    """
    for record in records:
        number = record["number"]
        try:
            payload = await pokeapi.get_species(number)
            details = parse_species(payload)
        except FETCH_ERRORS as e:
            logger.error(f"Failed to fetch species data for #{number} {record['name']}: {e!r}")
            if tracker:
                tracker.update(success=False)
            continue
        
        # Only add; nothing set by the primary fetch is touched
        for key, value in details.items():
            record.setdefault(key, value)
        if tracker:
            tracker.update(success=True)
    
    return records


async def publish_records(
    notion: NotionClient,
    records: List[PokemonRecord],
    database_id: str,
    limiter: FixedDelayLimiter,
    tracker: Optional[StageTracker] = None,
) -> int:
    """
    Create one Notion page per record, waiting ``limiter`` before each call.
    
    Failed creates are logged and the next record is published.
    
    Returns:
        Number of pages created
    """
    created = 0
    
    for record in records:
        page = build_page(record, database_id)
        await limiter.acquire()
        
        try:
            response = await notion.create_page(page)
        except PUBLISH_ERRORS as e:
            logger.error(f"Failed to create page for #{record['number']} {record['name']}: {e}")
            if tracker:
                tracker.update(success=False)
            continue
        
        created += 1
        logger.info(
            f"Created page for #{record['number']} {record['name']}: "
            f"{response.get('url', response.get('id', ''))}"
        )
        if tracker:
            tracker.update(success=True)
    
    return created
