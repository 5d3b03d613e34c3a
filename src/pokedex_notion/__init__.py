"""Pokedex Notion - Import the Pokédex from PokeAPI into a Notion database."""

__version__ = "0.1.0"

from .config import Settings

__all__ = ["Settings"]
