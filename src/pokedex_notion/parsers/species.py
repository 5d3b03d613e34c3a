"""Extract enrichment fields from PokeAPI /pokemon-species responses."""

import re
from typing import Any, Dict, List

from ..exceptions import EnglishEntryNotFoundError
from ..utils.typing import SpeciesDetails, SpeciesPayload

ENGLISH = "en"

_LINE_BREAKS = re.compile(r"[\n\f\r]")


def find_english(entries: List[Dict[str, Any]], field: str) -> Dict[str, Any]:
    """Return the first entry whose language is English."""
    for entry in entries:
        if entry["language"]["name"] == ENGLISH:
            return entry
    raise EnglishEntryNotFoundError(field)


def clean_flavor_text(text: str) -> str:
    """Replace every line feed, form feed and carriage return with a space."""
    return _LINE_BREAKS.sub(" ", text)


def generation_label(generation_name: str) -> str:
    """``"generation-iv"`` -> ``"IV"``."""
    return generation_name.split("-")[-1].upper()


def parse_species(payload: SpeciesPayload) -> SpeciesDetails:
    """
    Extract flavor text, category and generation from a species payload.
    
    Raises:
        EnglishEntryNotFoundError: If there is no English flavor text or genus
    """
    flavor_entry = find_english(payload["flavor_text_entries"], "flavor_text_entries")
    genus_entry = find_english(payload["genera"], "genera")
    
    return {
        "flavor_text": clean_flavor_text(flavor_entry["flavor_text"]),
        "category": genus_entry["genus"],
        "generation": generation_label(payload["generation"]["name"]),
    }
