"""Types for the archive module."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ArchiveSpec:
    """Where a source will be archived.

    archive_name always ends in ``.zip``; archive_path is that name placed
    in the source's parent directory.
    """

    source: Path
    archive_name: str
    archive_path: Path


@dataclass(frozen=True)
class ArchiveInfo:
    """Summary of a written archive, used for logging only."""

    path: Path
    size_bytes: int
    entry_count: int

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "size_bytes": self.size_bytes,
            "entry_count": self.entry_count,
        }
