"""Pytest configuration and shared fixtures for proptype tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import structlog

from proptype import _config

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test against default settings, whatever the environment holds."""
    for name in ('PROPTYPE_LOG_LEVEL', 'PROPTYPE_LOG_JSON', 'PROPTYPE_UNKNOWN_KIND'):
        monkeypatch.delenv(name, raising=False)
    _config.reset()
    yield
    _config.reset()


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Undo configure_logging(): its root handler, the root level and structlog's configuration."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from proptype import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from proptype import Failure

    return Failure('must be positive, but was: -1')
