"""Error taxonomy for the archive-and-upload pipeline.

Every step raises exactly one of these on failure. None are caught inside
the pipeline; the CLI turns them into a message and a non-zero exit code.
"""

from pathlib import Path
from typing import Optional


class BashupError(Exception):
    """Base class for all pipeline failures."""


class NotFoundError(BashupError):
    """Raised when the source path does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Source path not found: {self.path}")


class ArchiveError(BashupError):
    """Raised when the ZIP archive cannot be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to create archive {self.path}: {reason}")


class UploadError(BashupError):
    """Raised on a transport failure or a non-success HTTP status."""

    def __init__(
        self,
        url: str,
        reason: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Upload to {url} failed: {reason}")


class ParseError(BashupError):
    """Raised when the upload response contains no download URL.

    The raw body is kept on the exception and repeated in the message so
    the user can see what the host actually returned.
    """

    def __init__(self, body: str) -> None:
        self.body = body
        super().__init__(
            f"No download URL found in upload response:\n{body}"
        )


class WriteError(BashupError):
    """Raised when the link file cannot be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to write link file {self.path}: {reason}")
