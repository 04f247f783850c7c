"""
GeneratorConfig - Runtime configuration from environment and CLI.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class GeneratorConfig:
    """
    Configuration for a thumbnail run.

    Attributes:
        root_path: Directory to scan
        force: Regenerate existing thumbnails
        workers: Worker threads (None = executor default)
        quality: JPEG quality for written thumbnails
    """
    root_path: str = ''
    force: bool = False
    workers: Optional[int] = None
    quality: int = 85

    @classmethod
    def from_env(cls) -> 'GeneratorConfig':
        """
        Load configuration from environment variables.

        SYNOTHUMB_WORKERS: worker thread count
        SYNOTHUMB_QUALITY: JPEG quality (default: 85)
        """
        workers = os.environ.get('SYNOTHUMB_WORKERS')
        return cls(
            workers=int(workers) if workers else None,
            quality=int(os.environ.get('SYNOTHUMB_QUALITY', '85')),
        )

    def validate(self) -> List[str]:
        """Return a list of configuration errors (empty if valid)."""
        errors = []
        if not self.root_path:
            errors.append("Root path is required")
        if self.workers is not None and self.workers < 1:
            errors.append(f"Workers must be at least 1 (got {self.workers})")
        if not 1 <= self.quality <= 95:
            errors.append(f"Quality must be between 1 and 95 (got {self.quality})")
        return errors
