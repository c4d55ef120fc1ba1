"""Host platform capabilities used to locate external storage.

On a device these come from the platform context ("external files dirs" and
the primary external files dir). Anything that can answer the same questions
can stand in for it, which keeps directory selection testable off-device.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol, Sequence

# Platforms below this level only expose a single external files directory.
MULTI_STORAGE_API_LEVEL = 19


class Host(Protocol):
    api_level: int

    def external_files_dirs(self) -> Sequence[Optional[Path]]:
        """Candidate storage directories in platform order.

        Entries may be None when a volume is currently unavailable.
        """
        ...

    def external_files_dir(self) -> Path:
        """Primary external files directory, used as the fallback."""
        ...


@dataclass(frozen=True)
class StaticHost:
    """Host backed by a fixed list of directories."""

    fallback_dir: Path
    candidate_dirs: tuple[Optional[Path], ...] = field(default_factory=tuple)
    api_level: int = MULTI_STORAGE_API_LEVEL

    def external_files_dirs(self) -> Sequence[Optional[Path]]:
        return self.candidate_dirs

    def external_files_dir(self) -> Path:
        return self.fallback_dir


def supports_multiple_storage(host: Host) -> bool:
    return host.api_level >= MULTI_STORAGE_API_LEVEL
