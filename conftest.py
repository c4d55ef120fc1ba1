from pathlib import Path

import pytest

from external_files.host import StaticHost


@pytest.fixture
def legacy_file(tmp_path):
    legacy_dir = tmp_path / "old"
    legacy_dir.mkdir()
    file_path = legacy_dir / "diablo.mpq"
    file_path.write_bytes(bytes(range(256)) * 20)
    yield file_path


@pytest.fixture
def storage_dir(tmp_path):
    path = tmp_path / "storage"
    path.mkdir()
    yield path


@pytest.fixture
def host(storage_dir, tmp_path) -> StaticHost:
    # No candidate is mounted, so selection falls back to storage_dir.
    return StaticHost(
        fallback_dir=storage_dir, candidate_dirs=(tmp_path / "sdcard", None)
    )


@pytest.fixture
def make_dirs(tmp_path):
    """Create empty directories under tmp_path, returned in the order named."""

    def _make(*names: str) -> list[Path]:
        dirs = []
        for name in names:
            path = tmp_path / name
            path.mkdir()
            dirs.append(path)
        return dirs

    return _make
