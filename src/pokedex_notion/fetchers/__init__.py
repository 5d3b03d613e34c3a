"""Fetcher modules for external data sources."""

from . import pokeapi, notion

__all__ = ["pokeapi", "notion"]
