"""Assemble Notion create-page documents from Pokémon records."""

from typing import Any, Dict, List, Optional

from ..utils.typing import PokemonRecord

BULBAPEDIA_PROMPT = "View This Pokémon's Entry on Bulbapedia:"
SPRITE_FILE_NAME = "Pokemon Sprite"

# Notion property name -> record key
NUMBER_PROPERTIES = [
    ("No", "number"),
    ("Height", "height"),
    ("Weight", "weight"),
    ("HP", "hp"),
    ("Attack", "attack"),
    ("Defense", "defense"),
    ("Sp. Attack", "special_attack"),
    ("Sp. Defense", "special_defense"),
    ("Speed", "speed"),
]


def _text(content: str) -> Dict[str, Any]:
    return {"type": "text", "text": {"content": content}}


def _external(url: str) -> Dict[str, Any]:
    return {"type": "external", "external": {"url": url}}


def _block(block_type: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"object": "block", "type": block_type, block_type: payload}


def build_properties(record: PokemonRecord) -> Dict[str, Any]:
    """Database properties for a record; enrichment fields may be missing."""
    category: Optional[str] = record.get("category")
    sprite = record.get("sprite")
    
    properties: Dict[str, Any] = {
        "Name": {"title": [{"text": {"content": record["name"]}}]},
        "Category": {"rich_text": [_text(category)] if category is not None else []},
        "Type": {"multi_select": record["types"]},
        "Sprite": {
            "files": [
                {"type": "external", "name": SPRITE_FILE_NAME, "external": {"url": sprite}}
            ] if sprite else []
        },
    }
    if "generation" in record:
        properties["Generation"] = {"select": {"name": record["generation"]}}
    
    for property_name, key in NUMBER_PROPERTIES:
        properties[property_name] = {"number": record[key]}
    
    return properties


def build_children(record: PokemonRecord) -> List[Dict[str, Any]]:
    """Page body: flavor text quote, spacer, prompt, Bulbapedia bookmark."""
    return [
        _block("quote", {"rich_text": [_text(record.get("flavor_text", ""))]}),
        _block("paragraph", {"rich_text": [_text("")]}),
        _block("paragraph", {"rich_text": [_text(BULBAPEDIA_PROMPT)]}),
        _block("bookmark", {"url": record["bulbapedia_url"]}),
    ]


def build_page(record: PokemonRecord, database_id: str) -> Dict[str, Any]:
    """
    Build the Notion create-page request body for one Pokémon.
    
    Args:
        record: Record from the fetch stages, enriched or not
        database_id: Parent database ID
        
    Returns:
        JSON-serializable request body
    """
    page: Dict[str, Any] = {
        "parent": {"type": "database_id", "database_id": database_id},
        "properties": build_properties(record),
        "children": build_children(record),
    }
    if record.get("sprite"):
        page["icon"] = _external(record["sprite"])
    if record.get("artwork"):
        page["cover"] = _external(record["artwork"])
    
    return page
