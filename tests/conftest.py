"""Pytest fixtures for tuplesmith tests."""

from __future__ import annotations

import logging
import os

import pytest

from tuplesmith.observability.logging import ROOT_LOGGER_NAME


@pytest.fixture
def alphabet_10() -> list[int]:
    return list(range(1, 11))


@pytest.fixture
def alphabet_20() -> list[int]:
    return list(range(1, 21))


@pytest.fixture
def alphabet_50() -> list[int]:
    return list(range(1, 51))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every TUPLESMITH_* variable for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("TUPLESMITH_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_tuplesmith_logging():
    """Undo configure_logging() so later tests see records through caplog."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
