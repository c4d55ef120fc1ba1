"""Locate the application's external storage and migrate legacy files into it."""

from external_files.host import Host, StaticHost
from external_files.settings import StorageSettings
from external_files.storage import ExternalFilesManager, MigrationOutcome, select_storage_root

__all__ = [
    "ExternalFilesManager",
    "Host",
    "MigrationOutcome",
    "StaticHost",
    "StorageSettings",
    "select_storage_root",
]
