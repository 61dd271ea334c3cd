"""Download link extraction from the host's plaintext reply."""

import re

from bashup.errors import ParseError
from bashup.upload.uploader import UPLOAD_ENDPOINT


def extract_download_url(body: str, host: str = UPLOAD_ENDPOINT) -> str:
    """Return the first ``<host><non-space>+`` URL found in body.

    Lines are checked in order and only the first match on the first
    matching line counts, so a reply like::

        wget https://bashupload.com/abc123/file.zip

    yields ``https://bashupload.com/abc123/file.zip``.

    Raises:
        ParseError: If no line contains a matching URL.
    """
    pattern = re.compile(re.escape(host) + r"\S+")

    for line in body.splitlines():
        match = pattern.search(line.strip())
        if match:
            return match.group(0)

    raise ParseError(body)
