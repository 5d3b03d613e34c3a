"""Progress tracking for the sequential import stages."""

import time
from ..logging_config import get_logger

logger = get_logger(__name__)


class StageTracker:
    """Track and report progress of one pipeline stage."""
    
    def __init__(self, stage: str, total_items: int, report_every: int = 100):
        self.stage = stage
        self.total_items = total_items
        self.report_every = report_every
        self.processed = 0
        self.successful = 0
        self.failed = 0
        self.start_time = time.monotonic()
    
    def update(self, success: bool = True) -> None:
        """Update progress counters."""
        self.processed += 1
        if success:
            self.successful += 1
        else:
            self.failed += 1
        
        if self.report_every and self.processed % self.report_every == 0:
            self.report()
    
    def report(self) -> None:
        """Report current progress."""
        elapsed = time.monotonic() - self.start_time
        rate = self.processed / elapsed if elapsed > 0 else 0
        
        progress_pct = (self.processed / self.total_items) * 100 if self.total_items else 100.0
        
        logger.info(
            f"{self.stage}: {self.processed}/{self.total_items} "
            f"({progress_pct:.1f}%) - "
            f"Success: {self.successful}, Failed: {self.failed} - "
            f"Rate: {rate:.1f}/s"
        )
    
    def final_report(self) -> None:
        """Report final statistics."""
        elapsed = time.monotonic() - self.start_time
        
        logger.info(
            f"{self.stage} finished: {self.processed} items in {elapsed:.1f}s - "
            f"Success: {self.successful}, Failed: {self.failed}"
        )
