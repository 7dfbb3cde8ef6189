"""Removal of directories left empty by a deletion."""

import logging
import os
from pathlib import PurePosixPath

from filestore.storage.paths import CURRENT_DIR, PathTranslator

logger = logging.getLogger(__name__)


def purge_empty_directories(paths: PathTranslator, relative_path: str) -> None:
    """
    Walk up from the directory containing relative_path, removing each empty
    ancestor. Stops at the first directory that is missing, non-empty or the
    root itself. Failures are logged and end the walk; they never raise.
    """
    containing = PurePosixPath(relative_path).parent
    for relative_dir in (containing, *containing.parents):
        if str(relative_dir) == CURRENT_DIR:
            break
        directory = paths.absolute(str(relative_dir))
        if paths.is_root(directory) or not os.path.isdir(directory):
            break
        try:
            if os.listdir(directory):
                break
            os.rmdir(directory)
        except OSError as e:
            logger.warning("Could not purge directory %s: %s", directory, e)
            break
        logger.debug("Purged empty directory %s", directory)
