"""
Generator - Runs thumbnail generation over a collected file list.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence, Union

from .collector import Collector
from .generation_progress import GenerationProgress
from .generation_stats import FileFailure, GenerationStats
from .thumbnail_generator import ProcessResult, ThumbnailError, ThumbnailGenerator


class Generator:
    """
    Collects source photos under a root and generates their thumbnails.

    Collection completes before any generation starts. Files are then
    processed on a thread pool with no ordering between them; a failing
    file is recorded and never stops the others.
    """

    def __init__(
        self,
        thumbnail_generator: ThumbnailGenerator,
        collector: Optional[Collector] = None,
        max_workers: Optional[int] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize generator.

        Args:
            thumbnail_generator: Per-file thumbnail generator
            collector: Source collector (default: Collector with max_workers)
            max_workers: Thread pool size (None = executor default)
            logger: Optional logger instance
        """
        self.thumb_gen = thumbnail_generator
        self.max_workers = max_workers
        self.logger = logger or logging.getLogger(__name__)
        self.collector = collector or Collector(max_workers=max_workers, logger=self.logger)
        self.stats = GenerationStats()
        self._stop_requested = False

    def stop(self) -> None:
        """
        Stop starting new files; files in progress run to completion.

        Applies to the current or next generate call only.
        """
        self._stop_requested = True

    def run(
        self,
        root: str,
        force: bool = False,
        progress: Optional[GenerationProgress] = None
    ) -> GenerationStats:
        """
        Collect photos under root, then generate their thumbnails.

        Raises:
            CollectionError: If the tree cannot be traversed
        """
        files = self.collector.collect(root)
        self.logger.info(f"collected {len(files)} files to process")
        return self.generate(files, force=force, progress=progress)

    def generate(
        self,
        files: Sequence[str],
        force: bool = False,
        progress: Optional[GenerationProgress] = None
    ) -> GenerationStats:
        """
        Generate thumbnails for each file.

        Args:
            files: Source image paths
            force: Regenerate existing thumbnails
            progress: Optional progress tracker

        Returns:
            GenerationStats with results
        """
        self.stats = GenerationStats(total_to_process=len(files))

        if self._stop_requested:
            self.logger.info("Stop was requested before generation started")
            self.stats.cancelled = len(files)
            self._stop_requested = False
            return self.stats

        mode_str = " [FORCE]" if force else ""
        self.logger.info(f"Starting generation: {len(files)} files{mode_str}")

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._process_file, path, force)
                for path in files
            ]
            # Stats are only touched here, on the submitting thread.
            try:
                for future in as_completed(futures):
                    self._record(future.result(), progress)
            except KeyboardInterrupt:
                self.stop()
                raise
            finally:
                executor.shutdown(wait=True)
                self._stop_requested = False

        self.logger.info(
            f"Generation complete: {self.stats.generated} generated, "
            f"{self.stats.skipped} skipped, {self.stats.errors} errors "
            f"({self.stats.elapsed_seconds:.1f}s)"
        )
        if self.stats.cancelled:
            self.logger.info(f"Cancelled before start: {self.stats.cancelled} files")

        return self.stats

    def _process_file(
        self,
        path: str,
        force: bool
    ) -> Optional[Union[ProcessResult, FileFailure]]:
        """
        Process one file; never raises.

        Returns:
            ProcessResult, FileFailure, or None if cancelled
        """
        if self._stop_requested:
            return None

        try:
            return self.thumb_gen.process_file(path, force)
        except ThumbnailError as e:
            failure = FileFailure(source=path, stage=e.stage, message=str(e.cause))
        except Exception as e:
            failure = FileFailure(source=path, stage='unknown', message=str(e))

        self.logger.error(f"Error processing {path} ({failure.stage}): {failure.message}")
        return failure

    def _record(
        self,
        outcome: Optional[Union[ProcessResult, FileFailure]],
        progress: Optional[GenerationProgress]
    ) -> None:
        """Fold one unit's outcome into the stats."""
        if outcome is None:
            self.stats.cancelled += 1
            return

        if isinstance(outcome, FileFailure):
            self.stats.errors += 1
            self.stats.error_details.append(outcome)
            if progress:
                progress.on_file_failed(outcome)
        else:
            if outcome.skipped:
                self.stats.skipped += 1
            else:
                self.stats.generated += 1
                self.stats.thumbnails_written += len(outcome.generated)
            if progress:
                progress.on_file_processed(outcome)

        if progress:
            progress.on_progress_update(self.stats)

    def failed_files(self) -> List[str]:
        """Source paths that failed in the last run."""
        return [failure.source for failure in self.stats.error_details]
