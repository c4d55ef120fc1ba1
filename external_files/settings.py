"""Pydantic settings for locating external storage."""

import logging
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from external_files.errors import SettingsError
from external_files.host import MULTI_STORAGE_API_LEVEL, StaticHost

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

DEFAULT_COPY_BUFFER_SIZE = 1024


class StorageSettings(BaseSettings):
    """Settings describing the host's storage directories."""

    model_config = SettingsConfigDict(env_prefix="EXTERNAL_FILES_")

    base_path: Path = Field(
        Path("."),
        description="Base directory that relative storage paths resolve under.",
    )

    candidate_dirs: list[Path] = Field(
        default_factory=list,
        description="Candidate external storage directories, in platform order.",
    )

    fallback_dir: Path = Field(
        Path("files"),
        description="Directory used when no candidate is suitable.",
    )

    api_level: int = Field(
        MULTI_STORAGE_API_LEVEL,
        ge=1,
        description="Platform API level; below 19 only the fallback is used.",
    )

    copy_buffer_size: int = Field(
        DEFAULT_COPY_BUFFER_SIZE,
        gt=0,
        description="Chunk size in bytes for the copy fallback during migration.",
    )

    @model_validator(mode="after")
    def _apply_base_path(self) -> "StorageSettings":
        self.candidate_dirs = [self._resolve_under_base(d) for d in self.candidate_dirs]
        self.fallback_dir = self._resolve_under_base(self.fallback_dir)
        return self

    def _resolve_under_base(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.base_path / path

    def to_host(self) -> StaticHost:
        return StaticHost(
            fallback_dir=self.fallback_dir,
            candidate_dirs=tuple(self.candidate_dirs),
            api_level=self.api_level,
        )


def load_settings(settings_class: type[T], config_path: Optional[Path]) -> T:
    """Build settings for the CLI.

    A JSON file, when given, replaces the EXTERNAL_FILES_* environment entirely.
    A missing file falls back to the environment. An invalid one raises SettingsError.
    """
    if config_path is None:
        logger.debug("No config path provided, using default settings.")
        return settings_class()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return settings_class.model_validate_json(f.read())
    except FileNotFoundError:
        logger.warning(
            f"Config file not found at {config_path}, using default settings."
        )
        return settings_class()
    except ValidationError as e:
        raise SettingsError(f"Invalid config file {config_path}: {e}") from e
