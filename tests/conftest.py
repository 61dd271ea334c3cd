"""Shared fixtures for the bashup test suite."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test (or the CLI) applied."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's BASHUP_* variables out of the tests."""
    for name in (
        "BASHUP_UPLOAD_URL",
        "BASHUP_UPLOAD_TIMEOUT",
        "BASHUP_LINK_FILENAME",
        "BASHUP_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
