"""Archive-and-upload pipeline.

Runs the five steps in a fixed order:

  1. resolve   — validate the source and derive the archive location
  2. archive   — write the ZIP, replacing any previous one
  3. upload    — PUT the ZIP to the upload endpoint
  4. parse     — pull the download link out of the reply
  5. write     — save the link next to the archive and print it

Each step either succeeds or raises a BashupError subclass. Nothing is
caught or retried here; the first failure ends the run.
"""

from pathlib import Path
from typing import Optional

import structlog

from bashup.archive import create_archive, format_size, resolve_archive_spec
from bashup.core.config import Settings, get_settings
from bashup.upload import UploadResult, extract_download_url, upload_archive, write_link

logger = structlog.get_logger(__name__)


def run(
    source: Path | str,
    archive_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> UploadResult:
    """Archive source, upload it, and record the download link.

    Args:
        source: File or directory to archive.
        archive_name: Optional archive file name; ``.zip`` is appended if
            missing.
        settings: Overrides for endpoint, timeout and link file name.
            Loaded from the environment when omitted.

    Raises:
        NotFoundError: Source does not exist. Raised before anything is
            written or sent.
        ArchiveError: Source is the filesystem root, the archive would
            replace the source itself, or the ZIP cannot be written. The
            first two are raised before anything is written or sent.
        UploadError, ParseError, WriteError: From the corresponding step.
    """
    settings = settings or get_settings()

    spec = resolve_archive_spec(source, archive_name)
    logger.info(
        "pipeline.resolved",
        source=str(spec.source),
        archive=str(spec.archive_path),
    )

    info = create_archive(spec.source, spec.archive_path)
    logger.info(
        "pipeline.archived",
        archive=str(info.path),
        size=format_size(info.size_bytes),
        entries=info.entry_count,
    )

    body = upload_archive(
        info.path,
        base_url=settings.upload_url,
        timeout=settings.upload_timeout,
    )
    logger.info("pipeline.uploaded", endpoint=settings.upload_url)

    url = extract_download_url(body, host=settings.upload_url)
    link_file = write_link(url, spec.archive_path.parent, settings.link_filename)
    logger.info("pipeline.complete", url=url, link_file=str(link_file))

    return UploadResult(
        source=spec.source,
        archive_path=info.path,
        archive_size_bytes=info.size_bytes,
        url=url,
        link_file=link_file,
    )
