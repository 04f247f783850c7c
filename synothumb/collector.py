"""
Collector - Recursively discovers source photos under a root directory.
"""

import logging
import os
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from typing import List, Optional, Tuple

from .thumbnail_spec import METADATA_DIR, is_image_file


class CollectionError(Exception):
    """A directory under the root could not be listed."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot list directory {path}: {cause}")


class Collector:
    """
    Enumerates eligible photo files below a root directory.

    Each directory listing is an independent unit of work on a thread pool;
    subdirectories found by one listing are submitted as new units, and the
    per-directory file lists are concatenated as they complete. The result
    order is therefore unspecified.

    Reserved metadata directories are pruned, and symlinked directories are
    not followed, so traversal cannot loop.
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize collector.

        Args:
            max_workers: Thread pool size (None = executor default)
            logger: Optional logger instance
        """
        self.max_workers = max_workers
        self.logger = logger or logging.getLogger(__name__)

    def collect(self, root: str) -> List[str]:
        """
        Collect all photo paths at or below root.

        Args:
            root: Directory to scan

        Returns:
            List of source image paths

        Raises:
            CollectionError: If root or any directory below it cannot be listed
        """
        files: List[str] = []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            pending = {executor.submit(self._list_directory, root)}

            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    try:
                        dir_files, subdirs = future.result()
                    except CollectionError:
                        for other in pending:
                            other.cancel()
                        raise
                    files.extend(dir_files)
                    for subdir in subdirs:
                        pending.add(executor.submit(self._list_directory, subdir))

        self.logger.debug(f"Collected {len(files)} files under {root}")
        return files

    def _list_directory(self, path: str) -> Tuple[List[str], List[str]]:
        """
        List one directory.

        Returns:
            Tuple of (photo files, subdirectories to descend into)
        """
        files = []
        subdirs = []

        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        if entry.name == METADATA_DIR:
                            continue
                        subdirs.append(entry.path)
                    elif entry.is_file() and is_image_file(entry.name):
                        files.append(entry.path)
        except OSError as e:
            raise CollectionError(path, e) from e

        return files, subdirs
