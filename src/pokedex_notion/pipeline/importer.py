"""Main import pipeline orchestrator."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import httpx

from ..config import settings
from ..exceptions import PokedexNotionError
from ..logging_config import get_logger
from ..utils.typing import PokemonRecord
from ..fetchers.notion import NotionClient
from ..fetchers.pokeapi import PokeAPIClient
from .batch import StageTracker
from .page_builder import build_page
from .rate_limiter import FixedDelayLimiter, SleepFunc
from .stages import enrich_records, fetch_primary_records, publish_records

logger = get_logger(__name__)


@dataclass
class ImportResult:
    """Outcome of a full run."""
    requested: int
    fetched: int
    enriched: int
    published: int


class PokedexImporter:
    """Owns the HTTP client and API clients for one import run."""
    
    def __init__(
        self,
        database_id: Optional[str] = None,
        notion_key: Optional[str] = None,
        publish_delay: Optional[float] = None,
        sleep: Optional[SleepFunc] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.database_id = database_id or settings.notion_database_id
        self.notion_key = notion_key or settings.notion_key
        delay = settings.publish_delay if publish_delay is None else publish_delay
        self.limiter = FixedDelayLimiter(delay, sleep=sleep)
        self.transport = transport
        self.http_client: Optional[httpx.AsyncClient] = None
        self.pokeapi: Optional[PokeAPIClient] = None
        self.notion: Optional[NotionClient] = None
    
    async def __aenter__(self):
        """Async context manager entry."""
        if self.transport is not None:
            self.http_client = httpx.AsyncClient(
                timeout=settings.http_timeout, transport=self.transport
            )
        else:
            self.http_client = httpx.AsyncClient(
                timeout=settings.http_timeout,
                http2=True,
            )
        self.pokeapi = PokeAPIClient(self.http_client)
        self.notion = NotionClient(self.http_client, token=self.notion_key)
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.http_client:
            await self.http_client.aclose()
    
    async def collect(self, start_id: int, end_id: int) -> List[PokemonRecord]:
        """Run the two fetch stages and return the enriched records."""
        fetch_tracker = StageTracker("Primary fetch", end_id - start_id + 1)
        records = await fetch_primary_records(
            self.pokeapi, start_id, end_id, settings.bulbapedia_base_url, fetch_tracker
        )
        fetch_tracker.final_report()
        
        enrich_tracker = StageTracker("Species enrichment", len(records))
        await enrich_records(self.pokeapi, records, enrich_tracker)
        enrich_tracker.final_report()
        
        return records
    
    async def preview(self, pokemon_id: int) -> Optional[Dict[str, Any]]:
        """Fetch and enrich one Pokémon and return its page document without publishing."""
        records = await self.collect(pokemon_id, pokemon_id)
        if not records:
            return None
        return build_page(records[0], self.database_id or "")
    
    async def run(self, start_id: int, end_id: int) -> ImportResult:
        """Fetch, enrich and publish every Pokémon in the range."""
        if not self.database_id:
            raise PokedexNotionError("No Notion database ID configured (set NOTION_DATABASE_ID)")
        
        logger.info(f"Importing Pokémon #{start_id} to #{end_id}")
        records = await self.collect(start_id, end_id)
        
        publish_tracker = StageTracker("Publish", len(records), report_every=50)
        published = await publish_records(
            self.notion, records, self.database_id, self.limiter, publish_tracker
        )
        publish_tracker.final_report()
        
        logger.info("Operation complete.")
        return ImportResult(
            requested=end_id - start_id + 1,
            fetched=len(records),
            enriched=sum(1 for record in records if "flavor_text" in record),
            published=published,
        )


async def import_pokedex(
    start_id: Optional[int] = None,
    end_id: Optional[int] = None,
    publish_delay: Optional[float] = None,
) -> ImportResult:
    """Run a full import with settings-derived defaults."""
    start = settings.start_id if start_id is None else start_id
    end = settings.end_id if end_id is None else end_id
    
    async with PokedexImporter(publish_delay=publish_delay) as importer:
        return await importer.run(start, end)
