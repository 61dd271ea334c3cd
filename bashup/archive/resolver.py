"""Source path resolution and archive naming.

Turns the user's path argument (and optional archive name) into an
ArchiveSpec. Nothing is written here; the only side effect is the
existence check.
"""

import logging
from pathlib import Path
from typing import Optional

from bashup.archive.types import ArchiveSpec
from bashup.errors import ArchiveError, NotFoundError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".zip"


def ensure_zip_suffix(name: str) -> str:
    """Append ``.zip`` to name unless it already ends with it (any case)."""
    if name.lower().endswith(ARCHIVE_SUFFIX):
        return name
    return f"{name}{ARCHIVE_SUFFIX}"


def resolve_archive_spec(
    source: Path | str,
    archive_name: Optional[str] = None,
) -> ArchiveSpec:
    """Validate the source path and derive where its archive will live.

    With an override, its base name is used (any directory part is
    dropped). Without one, a file's name minus its extension is used, or a
    directory's full name.
    Either way the archive sits next to the source.

    Raises:
        NotFoundError: If the source does not exist.
        ArchiveError: If the source has no name (the filesystem root) or
            the archive would land on the source file itself.
    """
    resolved = Path(source).expanduser().resolve()
    if not resolved.exists():
        raise NotFoundError(resolved)
    if not resolved.name:
        raise ArchiveError(resolved, "cannot archive a filesystem root")

    override = Path(archive_name.strip()).name if archive_name else ""
    if override:
        name = ensure_zip_suffix(override)
    else:
        base = resolved.name if resolved.is_dir() else (resolved.stem or resolved.name)
        name = ensure_zip_suffix(base)

    spec = ArchiveSpec(
        source=resolved,
        archive_name=name,
        archive_path=resolved.parent / name,
    )
    if spec.archive_path == resolved:
        raise ArchiveError(spec.archive_path, "archive would overwrite the source")
    logger.debug("Resolved %s -> %s", resolved, spec.archive_path)
    return spec
