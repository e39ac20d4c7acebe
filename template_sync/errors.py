"""
Exceptions raised by template-sync.

Everything derives from TemplateSyncError so the CLI can report any
failure with a single except clause.
"""


class TemplateSyncError(Exception):
    """Base class for all template-sync failures."""


class ConfigurationError(TemplateSyncError):
    """template.json is missing a source or does not match the schema."""


class CloneError(TemplateSyncError):
    """The template repository could not be cloned."""


class FileIOError(TemplateSyncError):
    """A write, copy, mkdir or directory scan failed."""


class UnsupportedCommandError(TemplateSyncError):
    """The sub-command is neither commit nor pull."""
