"""Structured logging via structlog.

Configured once by the CLI before the pipeline runs.

Renderer selection:
  debug=True  — `ConsoleRenderer` with colours, DEBUG level.
  debug=False — `JSONRenderer`, INFO level.

Everything is written to stderr. stdout is reserved for the download
link so the tool can be used in shell pipelines.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(debug: bool = False) -> None:
    """Configure structlog and the stdlib logging bridge.

    Calling multiple times is safe — the last call wins.
    """
    level = logging.DEBUG if debug else logging.INFO

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Library modules (and httpx) log through stdlib logging.
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )
