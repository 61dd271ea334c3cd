"""Command-line entry point.

    bashup PATH [ARCHIVE_NAME] [--debug]

Prints the download link on stdout. Any failure is reported as a single
``error:`` line on stderr with exit code 1.
"""

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from bashup import __version__
from bashup.core.config import get_settings
from bashup.core.logging import configure_structlog
from bashup.errors import BashupError
from bashup.pipeline import run


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bashup",
        description="Zip a file or directory, upload it to bashupload.com, "
        "and save the download link next to the archive.",
    )
    ap.add_argument("path", help="File or directory to archive and upload")
    ap.add_argument(
        "archive_name",
        nargs="?",
        default=None,
        help="Archive file name (.zip is appended if missing)",
    )
    ap.add_argument("--debug", action="store_true", help="Verbose console logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"error: invalid BASHUP_* setting: {exc}", file=sys.stderr)
        return 1
    if args.debug:
        settings.debug = True
    configure_structlog(debug=settings.debug)

    try:
        run(args.path, args.archive_name, settings=settings)
    except BashupError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
