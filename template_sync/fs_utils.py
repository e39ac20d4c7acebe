"""
Filesystem helpers shared by the merge and copy phases.
"""

import logging
import os
import shutil

from .errors import FileIOError

logger = logging.getLogger(__name__)


def mkdirp(path: str) -> None:
    """
    Create every missing directory from the filesystem root down to path.

    Existing segments are left alone; a segment created concurrently by
    someone else counts as success.

    Raises:
        FileIOError: a segment could not be created
    """
    path = os.path.abspath(path)
    parts = path.split(os.sep)
    for index in range(1, len(parts) + 1):
        segment = os.sep.join(parts[:index]) or os.sep
        if os.path.isdir(segment):
            continue
        try:
            os.mkdir(segment)
        except FileExistsError:
            if not os.path.isdir(segment):
                raise FileIOError(f"cannot create directory {segment}: a file is in the way")
        except OSError as e:
            raise FileIOError(f"cannot create directory {segment}: {e}") from e


def copy_file(source: str, destination: str) -> None:
    """Copy a file's contents, creating the destination's parents first."""
    mkdirp(os.path.dirname(destination))
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        raise FileIOError(f"cannot copy {source} to {destination}: {e}") from e
    logger.debug("Copied %s -> %s", source, destination)
