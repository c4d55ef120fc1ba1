"""Choosing the external storage root among candidate directories."""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

# Presence of this file marks a directory the game has already used.
MARKER_FILE_NAME = "diablo.ini"


def _list_entries(directory: Path) -> list[str]:
    """Names directly under directory; an unlistable directory counts as empty."""
    try:
        return os.listdir(directory)
    except OSError as e:
        logger.debug(f"Cannot list candidate {directory}, treating as empty: {e}")
        return []


def _has_marker(directory: Path) -> bool:
    return MARKER_FILE_NAME in _list_entries(directory)


def select_storage_root(
    candidates: Iterable[Optional[Path]], fallback: Path
) -> Path:
    """
    Pick the directory that will hold the application's external files.

    The first candidate containing the marker file wins. Failing that, the
    first candidate with any entries at all. Failing that, the fallback.
    Missing (None) and unreadable candidates never win.

    Args:
        candidates: Candidate directories in platform order
        fallback: Directory used when no candidate qualifies

    Returns:
        Absolute path of the chosen directory
    """
    dirs = [Path(c) for c in candidates if c is not None]

    for directory in dirs:
        if _has_marker(directory):
            logger.info(f"Using {directory}, it holds {MARKER_FILE_NAME}")
            return directory.absolute()

    for directory in dirs:
        if len(_list_entries(directory)) > 0:
            logger.info(f"Using first non-empty candidate {directory}")
            return directory.absolute()

    logger.info(f"No usable candidate directory, falling back to {fallback}")
    return Path(fallback).absolute()
