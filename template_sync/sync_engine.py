"""
Two-way synchronization between a project and its template repository.

A run loads the project config, re-clones the template cache, merges the
configured structured files and then copies every other file across in
the requested direction.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional

from .config import Config, ConfigLoader
from .errors import UnsupportedCommandError
from .fs_utils import copy_file
from .json_merger import COMMIT, PULL, JsonMerger
from .template_cache import TemplateCache
from .tree_walker import TreeWalker

logger = logging.getLogger(__name__)

COMMANDS = (COMMIT, PULL)


class SyncEngine:
    """Orchestrates a commit or pull between a project and its template."""

    def __init__(self, config_loader: Optional[ConfigLoader] = None,
                 template_cache: Optional[TemplateCache] = None,
                 merger: Optional[JsonMerger] = None,
                 walker: Optional[TreeWalker] = None,
                 max_workers: Optional[int] = None):
        """
        Initialize the SyncEngine.

        Args:
            config_loader: Reads template.json and .gitignore
            template_cache: Clones and maps paths into the template cache
            merger: Merges the configured structured files
            walker: Enumerates files to copy
            max_workers: Pool size for the merge and copy phases
        """
        self.config_loader = config_loader or ConfigLoader()
        self.template_cache = template_cache or TemplateCache()
        self.merger = merger or JsonMerger()
        self.walker = walker or TreeWalker(max_workers)
        self.max_workers = max_workers

    def _fan_out(self, func: Callable, items: Iterable) -> List:
        """
        Apply func to every item concurrently.

        Every call runs to completion; the first failure, in item order, is
        re-raised once the pool has drained.
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(func, item) for item in items]
        return [future.result() for future in futures]

    def ignored_names(self, config: Config) -> FrozenSet[str]:
        """Configured ignore names plus the cache directory, whatever it is called."""
        return config.ignore | {self.template_cache.directory_name}

    def merge_json(self, config: Config, project_root: str, template_root: str,
                   cmd: str) -> List[str]:
        """Merge every configured structured file, returning the paths written."""
        written = self._fan_out(
            lambda spec: self.merger.merge(spec, project_root, template_root, cmd),
            config.json
        )
        return [path for path in written if path]

    def commit_files(self, config: Config, project_root: str) -> List[str]:
        """Copy every non-ignored project file into the template cache."""
        files = self.walker.files(project_root, self.ignored_names(config))

        def copy(file_path: str) -> str:
            template_file = self.template_cache.to_template_path(file_path, project_root)
            copy_file(file_path, template_file)
            return template_file

        return self._fan_out(copy, files)

    def pull_files(self, config: Config, project_root: str, template_root: str) -> List[str]:
        """Copy every non-ignored template file into the project."""
        files = self.walker.files(template_root, self.ignored_names(config))

        def copy(template_file: str) -> str:
            file_path = self.template_cache.to_project_path(template_file, template_root,
                                                            project_root)
            copy_file(template_file, file_path)
            return file_path

        return self._fan_out(copy, files)

    def run(self, project_root: str, cmd: str) -> Dict:
        """
        Synchronize a project with its template.

        The command is only checked after the config has been loaded, the
        template cloned and the merge phase run, so an unknown command still
        refreshes the cache before failing.

        Args:
            project_root: Project directory holding template.json
            cmd: 'commit' or 'pull'

        Returns:
            Dict with the command, the merged files and the copied files

        Raises:
            ConfigurationError: template.json has no source
            CloneError: the template could not be cloned
            FileIOError: a merge write or file copy failed
            UnsupportedCommandError: cmd is neither commit nor pull
        """
        project_root = os.path.abspath(project_root)
        config = self.config_loader.load(project_root)
        template_root = self.template_cache.refresh(config.source, project_root)

        merged_files = self.merge_json(config, project_root, template_root, cmd)

        if cmd == COMMIT:
            copied_files = self.commit_files(config, project_root)
        elif cmd == PULL:
            copied_files = self.pull_files(config, project_root, template_root)
        else:
            raise UnsupportedCommandError('invalid sub-command')

        logger.debug("%s finished: %d merged, %d copied", cmd, len(merged_files),
                     len(copied_files))
        return {
            'command': cmd,
            'merged_files': merged_files,
            'copied_files': copied_files,
        }
