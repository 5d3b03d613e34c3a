"""PokeAPI client."""

from typing import Optional
import httpx
from ..config import settings
from ..logging_config import get_logger
from ..utils.typing import PokemonPayload, SpeciesPayload

logger = get_logger(__name__)


class PokeAPIClient:
    """Async client for the read-only PokeAPI."""
    
    def __init__(self, client: httpx.AsyncClient, base_url: Optional[str] = None):
        self.client = client
        self.base_url = (base_url or settings.pokeapi_base_url).rstrip("/")
    
    async def _get_json(self, url: str):
        """Make GET request and return JSON; HTTP errors propagate."""
        logger.debug(f"GET {url}")
        response = await self.client.get(url, timeout=settings.http_timeout)
        response.raise_for_status()
        return response.json()
    
    async def get_pokemon(self, pokemon_id: int) -> PokemonPayload:
        """Get the primary record for a Pokédex number."""
        return await self._get_json(f"{self.base_url}/pokemon/{pokemon_id}")
    
    async def get_species(self, pokemon_id: int) -> SpeciesPayload:
        """Get the species record (flavor text, genera, generation)."""
        return await self._get_json(f"{self.base_url}/pokemon-species/{pokemon_id}")
