"""
Recursive file enumeration with a basename ignore list.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

from .errors import FileIOError

logger = logging.getLogger(__name__)


class TreeWalker:
    """Lists every file under a root, skipping ignored names at any depth."""

    def __init__(self, max_workers: Optional[int] = None):
        """
        Initialize the TreeWalker.

        Args:
            max_workers: Size of the scanning pool (executor default if None)
        """
        self.max_workers = max_workers

    def scan_directory(self, directory: str, ignore: Iterable[str]) -> Tuple[List[str], List[str]]:
        """
        Scan one directory level.

        Args:
            directory: Directory to scan
            ignore: Basenames to skip

        Returns:
            (files, subdirectories) found directly in the directory
        """
        files = []
        subdirectories = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.name in ignore:
                        continue
                    if entry.is_dir():
                        subdirectories.append(entry.path)
                    else:
                        files.append(entry.path)
        except OSError as e:
            raise FileIOError(f"cannot list directory {directory}: {e}") from e
        return files, subdirectories

    def files(self, root: str, ignore: Iterable[str]) -> List[str]:
        """
        Find all non-ignored files under root.

        Each level of the tree is scanned concurrently. A failure scanning any
        directory fails the whole walk once the level has drained. The order
        of the result is unspecified.

        Args:
            root: Directory to walk
            ignore: Basenames excluded from the result; an ignored directory
                prunes its whole subtree

        Returns:
            Absolute paths of the files found
        """
        ignore = frozenset(ignore)
        found = []
        level = [os.path.abspath(root)]
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            while level:
                futures = [executor.submit(self.scan_directory, d, ignore) for d in level]
                next_level = []
                for future in futures:
                    files, subdirectories = future.result()
                    found.extend(files)
                    next_level.extend(subdirectories)
                level = next_level
        logger.debug("Found %d files under %s", len(found), root)
        return found
