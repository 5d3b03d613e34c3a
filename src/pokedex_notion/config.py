"""Configuration settings using pydantic-settings."""

from typing import Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Notion credentials (validated by the CLI before publishing)
    notion_key: Optional[str] = Field(None, description="Notion integration token")
    notion_database_id: Optional[str] = Field(None, description="Target Notion database ID")
    
    # Catalog range
    start_id: int = Field(1, description="First Pokédex number to import")
    end_id: int = Field(1010, description="Last Pokédex number to import (inclusive)")
    
    # Rate limiting
    publish_delay: float = Field(0.3, description="Seconds to wait before each Notion page create")
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    # Timeouts
    http_timeout: float = Field(30.0, description="HTTP request timeout in seconds")
    
    # API settings
    pokeapi_base_url: str = Field(
        "https://pokeapi.co/api/v2",
        description="PokeAPI base URL"
    )
    bulbapedia_base_url: str = Field(
        "https://bulbapedia.bulbagarden.net",
        description="Bulbapedia base URL used for reference links"
    )
    notion_base_url: str = Field(
        "https://api.notion.com/v1",
        description="Notion API base URL"
    )
    notion_version: str = Field("2022-06-28", description="Notion-Version header value")
    
    @model_validator(mode="after")
    def check_id_range(self) -> "Settings":
        if self.start_id < 1:
            raise ValueError("start_id must be a positive integer")
        if self.end_id < self.start_id:
            raise ValueError("end_id must not be lower than start_id")
        return self


# Global settings instance
settings = Settings()
