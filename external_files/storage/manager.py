"""External files manager.

Owns the storage root chosen for the application's external files and moves
legacy files into it. Migration never raises: a file that cannot be moved is
left where it was so a later run can try again.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Union

from external_files.host import Host, supports_multiple_storage
from external_files.settings import DEFAULT_COPY_BUFFER_SIZE
from external_files.storage.selector import select_storage_root

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class MigrationOutcome(str, Enum):
    """Which branch a migration took."""

    RENAMED = "renamed"
    COPIED = "copied"
    ALREADY_MIGRATED = "already_migrated"
    COPY_FAILED = "copy_failed"


def _can_write(path: Path) -> bool:
    return os.access(path, os.W_OK)


def _delete_quietly(path: Path) -> None:
    try:
        path.unlink()
    except OSError as e:
        logger.debug(f"Could not delete {path}: {e}")


def copy_file(source: Path, target: Path, buffer_size: int = DEFAULT_COPY_BUFFER_SIZE) -> bool:
    """Copy source to target chunk by chunk.

    On failure the partially written target is removed and False is returned.
    """
    try:
        with open(source, "rb") as src, open(target, "wb") as dst:
            while True:
                chunk = src.read(buffer_size)
                if not chunk:
                    break
                dst.write(chunk)
    except OSError as e:
        logger.error(f"Failed to copy {source} to {target}: {e}")
        if target.exists():
            _delete_quietly(target)
        return False
    return True


class ExternalFilesManager:
    """Resolves the external storage root and migrates files into it.

    Usage:
        manager = ExternalFilesManager(host)
        if not manager.has_file("diablo.mpq"):
            manager.migrate_file(legacy_dir / "diablo.mpq")
    """

    def __init__(self, host: Host, copy_buffer_size: int = DEFAULT_COPY_BUFFER_SIZE):
        self._copy_buffer_size = copy_buffer_size
        self._external_files_directory = self._choose_directory(host)

    @staticmethod
    def _choose_directory(host: Host) -> Path:
        if supports_multiple_storage(host):
            return select_storage_root(
                host.external_files_dirs(), host.external_files_dir()
            )
        return Path(host.external_files_dir()).absolute()

    @property
    def external_files_directory(self) -> Path:
        return self._external_files_directory

    def has_file(self, file_name: str) -> bool:
        return self.get_file(file_name).exists()

    def get_file(self, file_name: str) -> Path:
        # Plain concatenation; an absolute name must not escape the root.
        return Path(f"{self._external_files_directory}/{file_name}")

    def migrate_file(self, file: PathLike) -> None:
        self.try_migrate_file(file)

    def try_migrate_file(self, file: PathLike) -> MigrationOutcome:
        """Move file into the storage root, reporting which branch was taken."""
        source = Path(file)
        target = self.get_file(source.name)

        if target.exists():
            if source.exists() and os.path.samefile(source, target):
                logger.info(f"{source} is already in the storage root")
                return MigrationOutcome.ALREADY_MIGRATED
            logger.info(f"{target} already exists, skipping {source}")
            if _can_write(source):
                _delete_quietly(source)
            return MigrationOutcome.ALREADY_MIGRATED

        try:
            source.rename(target)
            logger.info(f"Moved {source} to {target}")
            return MigrationOutcome.RENAMED
        except OSError as e:
            logger.info(f"Rename of {source} failed ({e}), copying instead")

        if not copy_file(source, target, self._copy_buffer_size):
            return MigrationOutcome.COPY_FAILED

        if _can_write(source):
            _delete_quietly(source)
        logger.info(f"Copied {source} to {target}")
        return MigrationOutcome.COPIED
