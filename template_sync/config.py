"""
Project configuration loading.

Combines template.json and .gitignore found at the project root into a
resolved, immutable Config.
"""

import json
import logging
import os
from typing import Dict, FrozenSet, List, NamedTuple, Tuple

import jsonschema

from .config_schema import validate_config
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE = 'template.json'
IGNORE_FILE = '.gitignore'
TEMPLATE_DIR = '.template'

# Always excluded from the file copy, whatever the configuration says
DEFAULT_IGNORE = frozenset(['.git', TEMPLATE_DIR])


class JsonFileSpec(NamedTuple):
    """A structured file merged key by key instead of copied."""

    name: str
    ignore_keys: FrozenSet[str] = frozenset()


class Config(NamedTuple):
    """Resolved sync configuration for one invocation."""

    source: str
    ignore: FrozenSet[str]
    json: Tuple[JsonFileSpec, ...]
    raw: Dict


class ConfigLoader:
    """Reads and combines the project configuration and ignore rules."""

    def read_config_file(self, file_path: str) -> Dict:
        """
        Read template.json.

        A missing or unparseable file reads as an empty object, as does a
        file whose top-level value is not an object.
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.debug("Could not read %s, using empty config: %s", file_path, e)
            return {}
        if not isinstance(data, dict):
            logger.debug("%s does not hold an object, using empty config", file_path)
            return {}
        return data

    def read_ignore_file(self, file_path: str) -> List[str]:
        """
        Read .gitignore as a flat list of names.

        Lines are taken literally: no comment or glob handling. Undecodable
        bytes are replaced; a missing file reads as an empty list.
        """
        try:
            with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
                content = f.read()
        except OSError as e:
            logger.debug("Could not read %s, ignoring nothing extra: %s", file_path, e)
            return []
        return [line for line in content.splitlines() if line]

    def load(self, project_root: str) -> Config:
        """
        Build the Config for a project.

        Args:
            project_root: Directory holding template.json

        Returns:
            The resolved Config

        Raises:
            ConfigurationError: source is missing or the file breaks the schema
        """
        raw = self.read_config_file(os.path.join(project_root, CONFIG_FILE))
        gitignore = self.read_ignore_file(os.path.join(project_root, IGNORE_FILE))

        if not raw.get('source'):
            raise ConfigurationError('config is missing source')

        try:
            validate_config(raw)
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"invalid {CONFIG_FILE}: {e.message}") from e

        json_specs = tuple(
            JsonFileSpec(entry['name'], frozenset(entry.get('ignoreKeys') or []))
            for entry in raw.get('json') or []
        )

        ignore = frozenset(gitignore)
        ignore |= frozenset(spec.name for spec in json_specs)
        ignore |= DEFAULT_IGNORE
        ignore |= frozenset(raw.get('ignore') or [])

        logger.debug("Loaded config from %s: source=%s, %d json files, %d ignored names",
                     project_root, raw['source'], len(json_specs), len(ignore))

        return Config(source=raw['source'], ignore=ignore, json=json_specs, raw=raw)
