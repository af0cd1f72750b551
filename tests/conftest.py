"""Pytest configuration and shared fixtures for guarded tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from guarded import CollectingSink, default_sink
from guarded._config import reset
from guarded._logging import LOGGER_NAME
from guarded.pytest_plugin import failure_sink  # noqa: F401


@pytest.fixture(autouse=True)
def clean_guarded_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with no config and an empty default sink."""
    monkeypatch.delenv('GUARDED_CATCH', raising=False)
    monkeypatch.delenv('GUARDED_LOG_LEVEL', raising=False)
    reset()
    default_sink().clear()
    yield
    # Undo configure_logging()
    guarded_logger = logging.getLogger(LOGGER_NAME)
    guarded_logger.handlers.clear()
    guarded_logger.setLevel(logging.NOTSET)
    guarded_logger.propagate = True
    reset()
    default_sink().clear()
    structlog.reset_defaults()


@pytest.fixture
def sink() -> CollectingSink:
    """A fresh collecting sink."""
    return CollectingSink()


@pytest.fixture
def calls() -> list[str]:
    """Ordered log of which callables ran."""
    return []
