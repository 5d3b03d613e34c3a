"""Species slug to display name normalization."""

import re
from typing import List, Tuple

# Applied in order, first match only. Covers names whose canonical spelling
# has punctuation that title-casing a slug cannot produce.
NAME_CORRECTIONS: List[Tuple[str, str]] = [
    (r"^Mr M", "Mr. M"),
    (r"^Mime Jr", "Mime Jr."),
    (r"^Mr R", "Mr. R"),
    (r"mo O", "mo-o"),
    (r"Porygon Z", "Porygon-Z"),
    (r"Type Null", "Type: Null"),
    (r"Ho Oh", "Ho-Oh"),
    (r"Nidoran F", "Nidoran♀"),
    (r"Nidoran M", "Nidoran♂"),
    (r"Flabebe", "Flabébé"),
]

_COMPILED_CORRECTIONS = [
    (re.compile(pattern), replacement) for pattern, replacement in NAME_CORRECTIONS
]


def title_case_slug(slug: str) -> str:
    """Capitalize the first letter of each hyphen-separated token and join with spaces."""
    return " ".join(token[:1].upper() + token[1:] for token in slug.split("-"))


def apply_corrections(name: str) -> str:
    """Run every entry of the correction table over ``name``, in order."""
    for pattern, replacement in _COMPILED_CORRECTIONS:
        name = pattern.sub(replacement, name, count=1)
    return name


def normalize_species_name(slug: str) -> str:
    """
    Convert a PokeAPI species slug into its display name.
    
    Args:
        slug: Lowercase hyphen-delimited species name, e.g. ``"mr-mime"``
        
    Returns:
        Display name, e.g. ``"Mr. Mime"``
    """
    return apply_corrections(title_case_slug(slug))
