"""External files CLI commands.

Typer commands for inspecting the selected storage root and migrating
legacy files into it.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from external_files.errors import SettingsError
from external_files.settings import StorageSettings, load_settings
from external_files.storage.manager import ExternalFilesManager, MigrationOutcome
from external_files.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="external-files",
    help="Locate external storage and migrate legacy files into it",
    no_args_is_help=True,
)

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to a JSON file with storage settings. If not provided, settings come from EXTERNAL_FILES_* environment variables.",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Echo info logs to the console.")


def build_manager(config_path: Optional[Path], verbose: bool) -> ExternalFilesManager:
    setup_logging(console_level=logging.INFO if verbose else logging.WARNING)
    try:
        settings = load_settings(StorageSettings, config_path)
    except SettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    return ExternalFilesManager(settings.to_host(), settings.copy_buffer_size)


@app.command()
def root(
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the selected external storage directory."""
    manager = build_manager(config_path, verbose)
    typer.echo(str(manager.external_files_directory))


@app.command()
def has(
    name: str = typer.Argument(..., help="File name to look for in the storage root."),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Report whether NAME exists in the storage root (exit code 1 if not)."""
    manager = build_manager(config_path, verbose)
    if manager.has_file(name):
        typer.echo("yes")
        return
    typer.echo("no")
    raise typer.Exit(1)


@app.command()
def path(
    name: str = typer.Argument(..., help="File name inside the storage root."),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print where NAME lives (or would live) in the storage root."""
    manager = build_manager(config_path, verbose)
    typer.echo(str(manager.get_file(name)))


@app.command()
def migrate(
    files: List[Path] = typer.Argument(..., help="Legacy files to move into the storage root."),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Move each FILE into the storage root, copying across volumes when needed."""
    manager = build_manager(config_path, verbose)
    failed = 0
    for file in files:
        outcome = manager.try_migrate_file(file)
        if outcome is MigrationOutcome.COPY_FAILED:
            failed += 1
        typer.echo(f"{outcome.value}: {file}")
    if failed:
        logger.warning(f"{failed} file(s) left in place for a later retry")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
