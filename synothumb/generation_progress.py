"""
GenerationProgress - Tracks and displays generation progress.
"""

import logging
from typing import Optional

from .generation_stats import FileFailure, GenerationStats
from .thumbnail_generator import ProcessResult


class GenerationProgress:
    """
    Tracks and displays generation progress with optional per-file output.
    """
    
    def __init__(
        self,
        show_files: bool = False,
        log_interval: int = 100,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress tracker.
        
        Args:
            show_files: If True, print each file as it's processed
            log_interval: Log summary progress every N files (when not show_files)
            logger: Optional logger instance
        """
        self.show_files = show_files
        self.log_interval = log_interval
        self.logger = logger or logging.getLogger(__name__)
        self.last_logged = 0
    
    def on_file_processed(self, result: ProcessResult) -> None:
        """Called when a file completes, whether generated or skipped."""
        if not self.show_files:
            return
        if result.skipped:
            print(f"  [SKIP] {result.source} -> thumbnails exist")
        else:
            names = ', '.join(size.name.lower() for size in result.generated)
            print(f"  [OK] {result.source} -> {names}")
    
    def on_file_failed(self, failure: FileFailure) -> None:
        """Called when a file fails."""
        if self.show_files:
            print(f"  [ERROR] {failure.source} -> {failure.stage}: {failure.message}")
    
    def on_progress_update(self, stats: GenerationStats) -> None:
        """
        Called after each completed file to report overall progress.
        
        Args:
            stats: Current generation statistics
        """
        total_done = stats.completed_count
        
        if not self.show_files and total_done - self.last_logged >= self.log_interval:
            self.last_logged = total_done
            self.logger.info(
                f"Progress: {stats.generated} generated, {stats.skipped} skipped, "
                f"{stats.errors} errors ({stats.rate_per_minute:.1f}/min, "
                f"{stats.remaining_count} left)"
            )
    
    def __call__(self, stats: GenerationStats) -> None:
        """Allow use as callback for stats updates."""
        self.on_progress_update(stats)
