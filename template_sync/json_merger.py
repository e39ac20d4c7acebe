"""
Field-by-field merging of structured configuration files.

JSON files are merged with deep_merge after masking the keys each side owns
for itself. Files ending in .yaml or .yml go through ruamel.yaml so their
comments and key order survive the round trip.
"""

import json
import logging
import os
from typing import Dict, Iterable, Mapping, NamedTuple, Optional

import ruamel.yaml
from ruamel.yaml.error import YAMLError

from .config import JsonFileSpec
from .errors import FileIOError
from .fs_utils import mkdirp

logger = logging.getLogger(__name__)

COMMIT = 'commit'
PULL = 'pull'

YAML_SUFFIXES = ('.yaml', '.yml')


def deep_merge(target: Dict, source: Mapping) -> Dict:
    """
    Merge source into target, right-biased.

    Mapping values recurse into the matching value of target (treated as
    empty when absent or not a mapping); everything else, lists included,
    overwrites. Keys only in target are kept. target is modified in place
    and returned; source is left untouched.
    """
    for key, value in source.items():
        if isinstance(value, Mapping):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = {}
            target[key] = deep_merge(existing, value)
        else:
            target[key] = value
    return target


def omit(keys: Iterable[str], obj: Mapping) -> Dict:
    """Return a shallow copy of obj without the given top-level keys."""
    keys = set(keys)
    return {key: value for key, value in obj.items() if key not in keys}


class LoadResult(NamedTuple):
    """Outcome of reading a structured file."""

    data: Optional[Dict]
    error: Optional[Exception] = None

    def or_empty(self) -> Dict:
        return self.data if self.data is not None else {}


class JsonMerger:
    """Merges configured structured files between a project and its template."""

    def __init__(self):
        self.yaml = ruamel.yaml.YAML()
        self.yaml.preserve_quotes = True
        self.yaml.indent(mapping=2, sequence=4, offset=2)

    @staticmethod
    def is_yaml(file_path: str) -> bool:
        return file_path.lower().endswith(YAML_SUFFIXES)

    def try_load(self, file_path: str) -> LoadResult:
        """Read a structured file, reporting rather than raising failures."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if self.is_yaml(file_path):
                    data = self.yaml.load(f)
                else:
                    data = json.load(f)
        except (OSError, ValueError, YAMLError) as e:
            return LoadResult(None, e)
        if not isinstance(data, dict):
            return LoadResult(None, ValueError(f"{file_path} does not hold an object"))
        return LoadResult(data)

    def load(self, file_path: str) -> Dict:
        """
        Read a structured file.

        A missing, unreadable or unparseable file reads as an empty object.
        """
        result = self.try_load(file_path)
        if result.error is not None:
            logger.debug("Treating %s as empty: %s", file_path, result.error)
        return result.or_empty()

    def dump(self, file_path: str, data: Dict) -> None:
        """
        Write a structured file, creating parent directories as needed.

        JSON is written with 2-space indentation and a trailing newline.
        """
        mkdirp(os.path.dirname(file_path))
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                if self.is_yaml(file_path):
                    self.yaml.dump(data, f)
                else:
                    f.write(json.dumps(data, indent=2, ensure_ascii=False))
                    f.write('\n')
        except OSError as e:
            raise FileIOError(f"cannot write {file_path}: {e}") from e

    def merge(self, spec: JsonFileSpec, project_root: str, template_root: str,
              cmd: str) -> Optional[str]:
        """
        Merge one file pair in the direction given by cmd.

        Args:
            spec: The file and the keys excluded from the merge
            project_root: Project directory
            template_root: Template cache directory
            cmd: 'commit' (project into template) or 'pull' (template into
                project); anything else does nothing

        Returns:
            The path written, or None when nothing was written
        """
        project_file = os.path.join(project_root, spec.name)
        template_file = os.path.join(template_root, spec.name)

        if cmd == COMMIT:
            source_file, target_file = project_file, template_file
        elif cmd == PULL:
            source_file, target_file = template_file, project_file
        else:
            return None

        target_data = self.load(target_file)
        source_data = omit(spec.ignore_keys, self.load(source_file))
        merged = deep_merge(target_data, source_data)
        self.dump(target_file, merged)
        logger.debug("Merged %s into %s", source_file, target_file)
        return target_file
