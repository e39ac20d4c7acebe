"""
Template Sync Utility

A tool for keeping a project in step with a shared template repository,
merging JSON and YAML configuration files field by field.
"""

from .sync_engine import SyncEngine

__version__ = '0.1.0'
__all__ = ['SyncEngine']
