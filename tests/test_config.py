"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from pokedex_notion.config import Settings
from pokedex_notion.logging_config import PACKAGE_LOGGER, QUIET_LOGGERS, setup_logging


class TestSettings:
    """Test settings validation."""
    
    def test_end_lower_than_start_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, start_id=5, end_id=2)
    
    def test_non_positive_start_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, start_id=0)
    
    def test_single_id_range_accepted(self):
        config = Settings(_env_file=None, start_id=7, end_id=7)
        assert (config.start_id, config.end_id) == (7, 7)
    
    def test_notion_credentials_optional(self, monkeypatch):
        monkeypatch.delenv("NOTION_KEY", raising=False)
        monkeypatch.delenv("NOTION_DATABASE_ID", raising=False)
        
        config = Settings(_env_file=None)
        
        assert config.notion_key is None
        assert config.notion_database_id is None


class TestLogging:
    """Test logger levels set by setup_logging."""
    
    @pytest.fixture(autouse=True)
    def restore_levels(self):
        names = (PACKAGE_LOGGER, *QUIET_LOGGERS)
        saved = {name: logging.getLogger(name).level for name in names}
        yield
        for name, level in saved.items():
            logging.getLogger(name).setLevel(level)
    
    def test_package_level_follows_argument(self):
        setup_logging("debug")
        
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger("pokedex_notion.pipeline.stages").getEffectiveLevel() == logging.DEBUG
    
    def test_http_loggers_held_at_warning(self):
        setup_logging("DEBUG")
        
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
    
    def test_http_loggers_follow_stricter_level(self):
        setup_logging("ERROR")
        
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.ERROR
