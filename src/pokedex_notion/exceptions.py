"""Exceptions raised by the Pokédex import pipeline."""

from typing import Optional


class PokedexNotionError(Exception):
    """Base exception for the pokedex-notion package."""

    pass


class EnglishEntryNotFoundError(PokedexNotionError, LookupError):
    """Raised when a species payload has no English entry for a required field."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"No English entry found in '{field}'")


class NotionAPIError(PokedexNotionError):
    """Raised when the Notion API answers with a non-success status."""

    def __init__(self, status_code: int, code: Optional[str] = None, message: str = ""):
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(f"Notion API error {status_code} ({code or 'unknown'}): {message}")
