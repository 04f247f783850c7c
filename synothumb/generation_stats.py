"""
GenerationStats - Statistics for a generation run.
"""

import time
from dataclasses import dataclass, field
from typing import List


@dataclass
class FileFailure:
    """
    A source file that could not be processed.

    Attributes:
        source: Source image path
        stage: Failing stage ('output_dir', 'probe', 'decode', 'resize', 'write')
        message: Error message
    """
    source: str
    stage: str
    message: str

    def __str__(self) -> str:
        return f"{self.source} [{self.stage}]: {self.message}"


@dataclass
class GenerationStats:
    """
    Statistics for a generation run.
    
    Attributes:
        total_to_process: Total source files collected
        generated: Files with at least one thumbnail written
        skipped: Files whose thumbnails all existed
        errors: Files that failed
        cancelled: Files not started because a stop was requested
        thumbnails_written: Total thumbnail files written
        start_time: Start timestamp
        error_details: Failures, one per failed file
    """
    total_to_process: int = 0
    generated: int = 0
    skipped: int = 0
    errors: int = 0
    cancelled: int = 0
    thumbnails_written: int = 0
    start_time: float = field(default_factory=time.time)
    error_details: List[FileFailure] = field(default_factory=list)
    
    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time
    
    @property
    def rate_per_second(self) -> float:
        """Processing rate in files per second."""
        if self.elapsed_seconds > 0:
            return self.completed_count / self.elapsed_seconds
        return 0.0
    
    @property
    def rate_per_minute(self) -> float:
        """Processing rate in files per minute."""
        return self.rate_per_second * 60
    
    @property
    def completed_count(self) -> int:
        """Total completed (generated + skipped + errors)."""
        return self.generated + self.skipped + self.errors
    
    @property
    def remaining_count(self) -> int:
        """Remaining to process."""
        return self.total_to_process - self.completed_count - self.cancelled

    @property
    def success(self) -> bool:
        """True if no file failed and nothing was cancelled."""
        return self.errors == 0 and self.cancelled == 0
