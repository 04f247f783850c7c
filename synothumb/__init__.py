"""
Synology-style photo thumbnail generator.

Two-phase operation:
    1. Collect: Walk a directory tree for .jpg/.jpeg photos
    2. Generate: Write SM, M and XL thumbnails into @eaDir beside each photo
"""

__version__ = "1.0.0"

from .thumbnail_spec import ThumbnailSize, OutputTask, METADATA_DIR
from .collector import Collector, CollectionError
from .image_processor import ImageProcessor
from .thumbnail_generator import ThumbnailGenerator, ThumbnailError, ProcessResult
from .generation_stats import GenerationStats, FileFailure
from .generation_progress import GenerationProgress
from .generator import Generator
from .config import GeneratorConfig
from .reporter import Reporter

__all__ = [
    "ThumbnailSize",
    "OutputTask",
    "METADATA_DIR",
    "Collector",
    "CollectionError",
    "ImageProcessor",
    "ThumbnailGenerator",
    "ThumbnailError",
    "ProcessResult",
    "GenerationStats",
    "FileFailure",
    "GenerationProgress",
    "Generator",
    "GeneratorConfig",
    "Reporter",
]
