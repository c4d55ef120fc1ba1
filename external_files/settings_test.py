"""Tests for StorageSettings and settings loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from external_files.errors import SettingsError
from external_files.host import StaticHost
from external_files.settings import StorageSettings, load_settings


def test_defaults(monkeypatch):
    for name in ("CANDIDATE_DIRS", "FALLBACK_DIR", "API_LEVEL", "COPY_BUFFER_SIZE", "BASE_PATH"):
        monkeypatch.delenv(f"EXTERNAL_FILES_{name}", raising=False)

    settings = StorageSettings()

    assert settings.candidate_dirs == []
    assert settings.fallback_dir == Path("files")
    assert settings.api_level == 19
    assert settings.copy_buffer_size == 1024


def test_relative_paths_resolve_under_base(tmp_path):
    settings = StorageSettings(
        base_path=tmp_path,
        candidate_dirs=[Path("sd"), Path("/mnt/abs")],
        fallback_dir=Path("files"),
    )

    assert settings.candidate_dirs == [tmp_path / "sd", Path("/mnt/abs")]
    assert settings.fallback_dir == tmp_path / "files"


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("EXTERNAL_FILES_CANDIDATE_DIRS", json.dumps([str(tmp_path / "a")]))
    monkeypatch.setenv("EXTERNAL_FILES_FALLBACK_DIR", str(tmp_path / "fb"))
    monkeypatch.setenv("EXTERNAL_FILES_API_LEVEL", "16")

    settings = StorageSettings()

    assert settings.candidate_dirs == [tmp_path / "a"]
    assert settings.fallback_dir == tmp_path / "fb"
    assert settings.api_level == 16


@pytest.mark.parametrize("field", ["copy_buffer_size", "api_level"])
def test_rejects_non_positive_values(field):
    with pytest.raises(ValidationError):
        StorageSettings(**{field: 0})


def test_to_host(tmp_path):
    settings = StorageSettings(
        candidate_dirs=[tmp_path / "a", tmp_path / "b"],
        fallback_dir=tmp_path / "fb",
        api_level=21,
    )

    host = settings.to_host()

    assert host == StaticHost(
        fallback_dir=tmp_path / "fb",
        candidate_dirs=(tmp_path / "a", tmp_path / "b"),
        api_level=21,
    )
    assert list(host.external_files_dirs()) == [tmp_path / "a", tmp_path / "b"]
    assert host.external_files_dir() == tmp_path / "fb"


class TestLoadSettings:
    def test_from_json_file(self, tmp_path):
        config = tmp_path / "storage.json"
        config.write_text(
            json.dumps(
                {
                    "base_path": str(tmp_path),
                    "candidate_dirs": ["internal", "sdcard"],
                    "copy_buffer_size": 4096,
                }
            )
        )

        settings = load_settings(StorageSettings, config)

        assert settings.candidate_dirs == [tmp_path / "internal", tmp_path / "sdcard"]
        assert settings.fallback_dir == tmp_path / "files"
        assert settings.copy_buffer_size == 4096

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(StorageSettings, tmp_path / "absent.json")

        assert isinstance(settings, StorageSettings)

    def test_none_uses_defaults(self):
        assert isinstance(load_settings(StorageSettings, None), StorageSettings)

    def test_invalid_file_raises_settings_error(self, tmp_path):
        config = tmp_path / "storage.json"
        config.write_text(json.dumps({"copy_buffer_size": -1}))

        with pytest.raises(SettingsError):
            load_settings(StorageSettings, config)
