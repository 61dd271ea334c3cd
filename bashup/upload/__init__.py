"""Upload module: HTTP PUT, response parsing, and link persistence.

Public API:
    upload_archive(archive_path, base_url, timeout) -> str
    extract_download_url(body, host) -> str
    write_link(url, directory, filename) -> Path
"""

from bashup.upload.parser import extract_download_url
from bashup.upload.types import UploadResult
from bashup.upload.uploader import UPLOAD_ENDPOINT, build_upload_url, upload_archive
from bashup.upload.writer import LINK_FILENAME, write_link

__all__ = [
    "LINK_FILENAME",
    "UPLOAD_ENDPOINT",
    "UploadResult",
    "build_upload_url",
    "extract_download_url",
    "upload_archive",
    "write_link",
]
