"""Types for the upload module."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class UploadResult:
    """Outcome of a complete archive-and-upload run."""

    source: Path
    archive_path: Path
    archive_size_bytes: int
    url: str
    link_file: Path

    def to_dict(self) -> dict:
        return {
            "source": str(self.source),
            "archive_path": str(self.archive_path),
            "archive_size_bytes": self.archive_size_bytes,
            "url": self.url,
            "link_file": str(self.link_file),
        }
