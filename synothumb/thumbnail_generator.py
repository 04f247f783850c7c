"""
ThumbnailGenerator - Produces the missing thumbnails for one source photo.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .image_processor import ImageProcessor
from .thumbnail_spec import (
    ThumbnailSize,
    is_portrait,
    output_directory,
    output_tasks,
    select_reduction_factor,
)


class ThumbnailError(Exception):
    """
    Failure while processing one source file.

    Attributes:
        source: Source image path
        stage: One of 'output_dir', 'probe', 'decode', 'resize', 'write'
        cause: Underlying exception
    """

    def __init__(self, source: str, stage: str, cause: BaseException):
        self.source = source
        self.stage = stage
        self.cause = cause
        super().__init__(f"{source}: {stage} failed: {cause}")


@dataclass
class ProcessResult:
    """Outcome of a successful process_file call."""
    source: str
    generated: List[ThumbnailSize] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        """True if every thumbnail already existed."""
        return not self.generated


class ThumbnailGenerator:
    """
    Generates the fixed set of thumbnails for a source photo.

    Thumbnails live in <parent>/@eaDir/<filename>/. Only missing ones are
    generated unless forced, and the source is decoded at most once.
    """

    def __init__(
        self,
        processor: Optional[ImageProcessor] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize thumbnail generator.

        Args:
            processor: Image operations (default: Pillow ImageProcessor)
            logger: Optional logger instance
        """
        self.processor = processor or ImageProcessor()
        self.logger = logger or logging.getLogger(__name__)

    def process_file(self, source: str, force: bool = False) -> ProcessResult:
        """
        Ensure all thumbnails exist for a source image.

        Thumbnails written before a failing one stay on disk.

        Args:
            source: Source image path
            force: Regenerate thumbnails that already exist

        Returns:
            ProcessResult listing the sizes written

        Raises:
            ThumbnailError: Tagged with the stage that failed
        """
        try:
            os.makedirs(output_directory(source), exist_ok=True)
        except (OSError, ValueError) as e:
            raise ThumbnailError(source, 'output_dir', e) from e

        tasks = [
            task for task in output_tasks(source)
            if force or not os.path.exists(task.path)
        ]
        if not tasks:
            self.logger.debug(f"{source} thumbnails exist, skipped.")
            return ProcessResult(source=source)

        try:
            width, height = self.processor.probe_dimensions(source)
        except Exception as e:
            raise ThumbnailError(source, 'probe', e) from e

        portrait = is_portrait(width, height)
        reduction = select_reduction_factor(width, height)

        try:
            img = self.processor.decode(source, reduction)
        except Exception as e:
            raise ThumbnailError(source, 'decode', e) from e

        result = ProcessResult(source=source)
        for task in tasks:
            box = task.size.target_box(portrait)
            try:
                resized = self.processor.resize(img, box)
            except Exception as e:
                raise ThumbnailError(source, 'resize', e) from e

            try:
                self.processor.write(resized, task.path)
            except Exception as e:
                raise ThumbnailError(source, 'write', e) from e

            self.logger.debug(f"{source} => {task.path}")
            result.generated.append(task.size)

        self.logger.info(f"{source} generated thumbnails")
        return result
