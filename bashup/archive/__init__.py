"""Archive module: source resolution and ZIP creation.

Public API:
    resolve_archive_spec(source, archive_name) -> ArchiveSpec
    create_archive(source, archive_path) -> ArchiveInfo
"""

from bashup.archive.archiver import create_archive, format_size
from bashup.archive.resolver import ensure_zip_suffix, resolve_archive_spec
from bashup.archive.types import ArchiveInfo, ArchiveSpec

__all__ = [
    "ArchiveInfo",
    "ArchiveSpec",
    "create_archive",
    "ensure_zip_suffix",
    "format_size",
    "resolve_archive_spec",
]
