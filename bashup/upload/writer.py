"""Persists the download link next to the archive and echoes it."""

import logging
from pathlib import Path

from bashup.errors import WriteError

logger = logging.getLogger(__name__)

LINK_FILENAME = "bashupload_link.txt"


def write_link(url: str, directory: Path, filename: str = LINK_FILENAME) -> Path:
    """Write url as the only content of directory/filename and print it.

    The upload has already happened by the time this runs; a failure here
    is reported but leaves the hosted file in place.

    Raises:
        WriteError: If the file cannot be written.
    """
    link_file = directory / filename
    try:
        link_file.write_text(url, encoding="utf-8")
    except OSError as exc:
        raise WriteError(link_file, str(exc)) from exc

    logger.info("Download link saved to %s", link_file)
    print(url)
    return link_file
