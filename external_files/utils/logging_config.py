"""Centralized logging configuration for external-files."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(
    log_file_prefix: str = "external_files",
    log_dir: Path = Path("./logs"),
    console_level: int = logging.INFO,
) -> logging.Logger:
    """
    Configure logging for the command line tool.

    Sets up console (stderr) and file logging with consistent formatting.
    Stdout stays free for command output.
    Uses a rotating file handler that keeps at most 4 previous log files.
    Does nothing if the root logger already has handlers.

    Args:
        log_file_prefix: Prefix for the log file name (default: "external_files")
        log_dir: Directory the log file is written to (default: "./logs")
        console_level: Minimum level echoed to the console

    Returns:
        Logger instance for the calling module
    """
    root_logger = logging.getLogger()

    if root_logger.handlers:
        return logging.getLogger(__name__)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{log_file_prefix}.log"

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)

    # 1MB per file, 4 backups
    file_handler = RotatingFileHandler(
        log_file,
        mode="a",
        maxBytes=1024 * 1024,
        backupCount=4,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    return logging.getLogger(__name__)
