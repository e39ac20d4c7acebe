"""
The local checkout of the template repository.

The cache lives at <project root>/.template and is thrown away and cloned
again on every sync; it is never updated in place.
"""

import logging
import os
import shutil
import subprocess
from typing import Callable

from .config import TEMPLATE_DIR
from .errors import CloneError

logger = logging.getLogger(__name__)


def _relative_to(path: str, root: str) -> str:
    """Path of path below root, raising ValueError if it is not below it."""
    path = os.path.abspath(path)
    root = os.path.abspath(root)
    if os.path.commonpath([path, root]) != root:
        raise ValueError(f"{path} is not inside {root}")
    return os.path.relpath(path, root)


class TemplateCache:
    """Manages the cached template checkout of a project."""

    def __init__(self, runner: Callable = subprocess.run, directory_name: str = TEMPLATE_DIR):
        """
        Initialize the TemplateCache.

        Args:
            runner: Callable with the signature of subprocess.run, used to
                invoke git
            directory_name: Name of the cache directory under the project root
        """
        self.runner = runner
        self.directory_name = directory_name

    def root(self, project_root: str) -> str:
        return os.path.join(os.path.abspath(project_root), self.directory_name)

    def remove(self, project_root: str) -> None:
        """Delete the cache directory; absence or failure is not an error."""
        cache_root = self.root(project_root)
        try:
            shutil.rmtree(cache_root)
        except OSError as e:
            logger.debug("Could not remove %s: %s", cache_root, e)

    def refresh(self, source: str, project_root: str) -> str:
        """
        Replace the cache with a fresh clone of source.

        Args:
            source: Repository locator handed to git clone
            project_root: Project directory the cache belongs to

        Returns:
            The cache directory

        Raises:
            CloneError: git could not be run or exited non-zero
        """
        self.remove(project_root)
        project_root = os.path.abspath(project_root)
        args = ['git', '-C', project_root, 'clone', source, self.directory_name]
        logger.debug("Running %s", ' '.join(args))
        try:
            self.runner(args, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or '').strip() or f"exit status {e.returncode}"
            raise CloneError(f"failed to clone {source}: {detail}") from e
        except OSError as e:
            raise CloneError(f"failed to clone {source}: {e}") from e
        return self.root(project_root)

    def to_template_path(self, path: str, project_root: str) -> str:
        """Map a path under the project root to its mirror in the cache."""
        return os.path.join(self.root(project_root), _relative_to(path, project_root))

    def to_project_path(self, template_path: str, template_root: str, project_root: str) -> str:
        """Map a path under the cache to its mirror in the project root."""
        return os.path.join(os.path.abspath(project_root),
                            _relative_to(template_path, template_root))
