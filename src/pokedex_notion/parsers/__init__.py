"""Parsers that turn PokeAPI payloads into normalized records."""

from . import species_name, pokemon, species

__all__ = ["species_name", "pokemon", "species"]
