#!/usr/bin/env python3
"""
Command Line Interface for Template Sync Utility

Runs a commit or pull against the project in the current directory.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .common import format_sync_summary
from .errors import TemplateSyncError
from .sync_engine import SyncEngine


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        description="Synchronize a project with its template repository"
    )
    # Not restricted with choices: the engine reports unknown commands itself
    parser.add_argument("command", nargs="?",
                        help="commit (project -> template) or pull (template -> project)")
    parser.add_argument("--directory", "-C", default=None,
                        help="Project root (default: current directory)")
    parser.add_argument("--workers", "-w", type=int, default=None,
                        help="Number of parallel workers for merging and copying")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log every step")

    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    project_root = parsed_args.directory or os.getcwd()
    engine = SyncEngine(max_workers=parsed_args.workers)

    try:
        summary = engine.run(project_root, parsed_args.command)
    except TemplateSyncError as e:
        print(e, file=sys.stderr)
        return 1

    print(format_sync_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
