"""ZIP archive creation.

A single file is stored under its own name. A directory is stored
recursively under a top-level folder named after it, so extracting the
archive next to the source reproduces the original tree.
"""

import logging
import zipfile
from pathlib import Path

from bashup.archive.types import ArchiveInfo
from bashup.errors import ArchiveError

logger = logging.getLogger(__name__)

_SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_size(num_bytes: int) -> str:
    """Render a byte count as e.g. ``512 B`` or ``1.5 MB``."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    size = num_bytes / 1024
    for unit in _SIZE_UNITS[1:-1]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} {_SIZE_UNITS[-1]}"


def create_archive(source: Path, archive_path: Path) -> ArchiveInfo:
    """Compress source into a ZIP at archive_path, replacing any old file.

    Raises:
        ArchiveError: If the old archive cannot be removed or the new one
            cannot be written.
    """
    try:
        archive_path.unlink(missing_ok=True)
    except OSError as exc:
        raise ArchiveError(archive_path, f"cannot remove existing file: {exc}") from exc

    logger.info("Creating archive %s from %s", archive_path, source)

    try:
        with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            if source.is_dir():
                _add_directory(zf, source)
            else:
                zf.write(source, arcname=source.name)
            entry_count = len(zf.infolist())
        size_bytes = archive_path.stat().st_size
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
        raise ArchiveError(archive_path, str(exc)) from exc

    logger.info(
        "Archive ready: %s (%s, %d entries)",
        archive_path.name,
        format_size(size_bytes),
        entry_count,
    )
    return ArchiveInfo(
        path=archive_path,
        size_bytes=size_bytes,
        entry_count=entry_count,
    )


def _add_directory(zf: zipfile.ZipFile, source: Path) -> None:
    """Add every file and empty directory under source, rooted at source.name."""
    root = Path(source.name)
    contains_entries = False

    for item in sorted(source.rglob("*")):
        arcname = (root / item.relative_to(source)).as_posix()
        if item.is_dir():
            if not any(item.iterdir()):
                zf.writestr(f"{arcname}/", "")
                contains_entries = True
            continue
        zf.write(item, arcname=arcname)
        contains_entries = True

    if not contains_entries:
        zf.writestr(f"{root.as_posix()}/", "")
