"""Rate limiting utilities for external API calls."""

import asyncio
from typing import Awaitable, Callable, Optional
from ..logging_config import get_logger

logger = get_logger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class FixedDelayLimiter:
    """Wait a fixed interval before every request.
    
    With one request in flight at a time this caps the request rate at
    ``1 / delay`` per second. Notion allows an average of three.
    """
    
    def __init__(self, delay: float, sleep: Optional[SleepFunc] = None):
        """
        Initialize rate limiter.
        
        Args:
            delay: Seconds to wait before each request
            sleep: Awaitable sleep function (defaults to asyncio.sleep)
        """
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.delay = delay
        self._sleep = sleep or asyncio.sleep
    
    async def acquire(self) -> None:
        """Wait out the fixed delay."""
        logger.debug(f"Waiting {self.delay:.2f}s before next request")
        await self._sleep(self.delay)
