"""Shared pytest fixtures for bras tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``BRAS_*`` variables from the outer shell out of tests."""
    for name in ("BRAS_JSON_OUTPUT", "BRAS_QUIET", "BRAS_VERBOSE", "BRAS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and ``bras`` logger state after each test.

    The CLI reconfigures logging on every invocation.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bras = logging.getLogger("bras")
    bras_level = bras.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bras.setLevel(bras_level)
