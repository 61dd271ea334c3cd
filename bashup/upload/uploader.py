"""Archive uploader — sends the ZIP to bashupload.com in one PUT.

The archive's file name is appended to the endpoint so the host keeps a
readable name in the download link. There are no retries and no custom
headers: a single attempt either returns the response body or raises
UploadError.
"""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import quote

import httpx

from bashup.errors import UploadError

logger = logging.getLogger(__name__)

UPLOAD_ENDPOINT = "https://bashupload.com/"


def build_upload_url(base_url: str, filename: str) -> str:
    """Join the endpoint and file name, ensuring exactly one slash between."""
    return f"{base_url.rstrip('/')}/{quote(filename)}"


def upload_archive(
    archive_path: Path,
    base_url: str = UPLOAD_ENDPOINT,
    timeout: Optional[float] = None,
) -> str:
    """PUT the archive's bytes to the upload endpoint.

    Args:
        archive_path: The ZIP file to send.
        base_url: Upload endpoint; the file name is appended to it.
        timeout: Seconds to wait for the host. None waits until the
            transport itself gives up.

    Returns:
        The raw response body text.

    Raises:
        UploadError: On any transport failure or non-2xx status.
    """
    url = build_upload_url(base_url, archive_path.name)

    try:
        content = archive_path.read_bytes()
    except OSError as exc:
        raise UploadError(url, f"cannot read archive: {exc}") from exc

    logger.info("Uploading %s (%d bytes) to %s", archive_path.name, len(content), url)

    try:
        response = httpx.put(url, content=content, timeout=timeout)
    except httpx.HTTPError as exc:
        raise UploadError(url, str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        raise UploadError(
            url,
            f"HTTP {response.status_code}",
            status_code=response.status_code,
        )

    logger.debug("Upload response (%d): %s", response.status_code, response.text)
    return response.text
