"""Command-line interface for the Pokédex importer."""

import asyncio
import json

import httpx
import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .exceptions import NotionAPIError
from .fetchers.notion import NotionClient
from .logging_config import setup_logging, get_logger
from .pipeline.importer import PokedexImporter, import_pokedex

# Initialize CLI app
app = typer.Typer(
    name="pokedex-notion",
    help="Import the Pokédex from PokeAPI into a Notion database",
    add_completion=False,
)
console = Console()
logger = get_logger(__name__)


def _require_notion_settings() -> None:
    missing = [
        name for name, value in (
            ("NOTION_KEY", settings.notion_key),
            ("NOTION_DATABASE_ID", settings.notion_database_id),
        )
        if not value
    ]
    if missing:
        console.print(f"[red]Error: {', '.join(missing)} environment variable(s) required")
        console.print("Create an integration at: https://www.notion.so/my-integrations")
        raise typer.Exit(1)


@app.callback()
def main(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Set logging level",
        case_sensitive=False,
    ),
) -> None:
    """Pokedex Notion CLI - Publish Pokémon pages to a Notion database."""
    settings.log_level = log_level.upper()
    setup_logging(log_level)


@app.command()
def run(
    start: int = typer.Option(
        settings.start_id,
        "--start", "-s",
        help="First Pokédex number",
        min=1,
    ),
    end: int = typer.Option(
        settings.end_id,
        "--end", "-e",
        help="Last Pokédex number (inclusive)",
        min=1,
    ),
    delay: float = typer.Option(
        settings.publish_delay,
        "--delay",
        help="Seconds to wait before each page create",
        min=0.0,
    ),
) -> None:
    """Fetch, enrich and publish every Pokémon in the range."""
    _require_notion_settings()
    if end < start:
        console.print(f"[red]Error: --end ({end}) is lower than --start ({start})")
        raise typer.Exit(1)
    
    try:
        result = asyncio.run(import_pokedex(start, end, delay))
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Import interrupted by user")
        raise typer.Exit(130)
    
    table = Table(title="Import Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    
    table.add_row("Requested", str(result.requested))
    table.add_row("Fetched", str(result.fetched))
    table.add_row("Enriched", str(result.enriched))
    table.add_row("Published", str(result.published))
    
    console.print(table)


@app.command()
def preview(
    pokemon_id: int = typer.Argument(..., help="Pokédex number to preview", min=1),
) -> None:
    """Print the Notion page document for one Pokémon without publishing it."""
    
    async def _preview():
        async with PokedexImporter() as importer:
            return await importer.preview(pokemon_id)
    
    page = asyncio.run(_preview())
    if page is None:
        console.print(f"[red]Error: Could not fetch Pokémon #{pokemon_id}")
        raise typer.Exit(1)
    
    console.print_json(json.dumps(page, ensure_ascii=False))


@app.command()
def verify() -> None:
    """Check that the Notion token can read the configured database."""
    _require_notion_settings()
    
    async def _verify():
        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            return await NotionClient(client).retrieve_database(settings.notion_database_id)
    
    try:
        database = asyncio.run(_verify())
    except NotionAPIError as e:
        console.print(f"[red]❌ {e}")
        if e.status_code == 404:
            console.print("[yellow]Is the database shared with the integration?")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]❌ Request failed: {e}")
        raise typer.Exit(1)
    
    title = "".join(part.get("plain_text", "") for part in database.get("title", []))
    console.print("[green]✅ Token valid! Connected to Notion.")
    console.print(f"[green]Database:[/green] {title or database.get('id')}")
    console.print(f"[green]Properties:[/green] {', '.join(database.get('properties', {}))}")


@app.command()
def config() -> None:
    """Display current configuration."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    
    # Mask sensitive values
    table.add_row(
        "Notion Key",
        "***" + settings.notion_key[-4:] if settings.notion_key else "[red]Not set",
    )
    table.add_row(
        "Notion Database ID",
        settings.notion_database_id or "[red]Not set",
    )
    table.add_row("ID Range", f"{settings.start_id}-{settings.end_id}")
    table.add_row("Publish Delay", f"{settings.publish_delay}s")
    table.add_row("HTTP Timeout", f"{settings.http_timeout}s")
    table.add_row("PokeAPI", settings.pokeapi_base_url)
    table.add_row("Notion API", f"{settings.notion_base_url} ({settings.notion_version})")
    table.add_row("Log Level", settings.log_level)
    
    console.print(table)


if __name__ == "__main__":
    app()
