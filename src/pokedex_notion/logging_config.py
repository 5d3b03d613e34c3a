"""Logging configuration for the application."""

import logging
from typing import Optional
from rich.logging import RichHandler
from .config import settings

PACKAGE_LOGGER = "pokedex_notion"

# Held at WARNING or above
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Send log records through a RichHandler.
    
    Args:
        level: Level name for this package; defaults to ``settings.log_level``
    """
    level_name = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level_name)
    
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, markup=False, rich_tracebacks=True)],
    )
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)
    
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)
