"""Storage root selection and file migration."""

from external_files.storage.manager import ExternalFilesManager, MigrationOutcome, copy_file
from external_files.storage.selector import MARKER_FILE_NAME, select_storage_root

__all__ = [
    "ExternalFilesManager",
    "MigrationOutcome",
    "MARKER_FILE_NAME",
    "copy_file",
    "select_storage_root",
]
