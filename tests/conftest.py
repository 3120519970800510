"""Shared pytest fixtures and configuration for all tests."""

import logging
from collections.abc import Generator

import pytest

from rankeval.data.models import QueryPair
from rankeval.evaluation.diagnostics import CollectingDiagnosticSink

_SETTINGS_ENV_VARS = ("NUM_WORKERS", "SHOW_PROGRESS", "K_VALUES", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate every test from the developer's environment and .env file.

    Args:
        monkeypatch: pytest's monkeypatch fixture for modifying environment.
        tmp_path: Empty working directory, so no .env file is picked up.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sink() -> CollectingDiagnosticSink:
    """Return a diagnostic sink that records warnings in memory."""
    return CollectingDiagnosticSink()


@pytest.fixture
def ranking_pairs() -> list[QueryPair]:
    """Three queries with hand-verified metric values.

    Query 1: relevant {1..5}, hits at ranks 1, 3, 6, 9, 10
    Query 2: relevant {1, 2, 3}, hits at ranks 2, 5, 7
    Query 3: empty ground truth (always scores 0.0)
    """
    return [
        QueryPair([1, 6, 2, 7, 8, 3, 9, 10, 4, 5], [1, 2, 3, 4, 5]),
        QueryPair([4, 1, 5, 6, 2, 7, 3, 8, 9, 10], [1, 2, 3]),
        QueryPair([1, 2, 3, 4, 5], []),
    ]


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Yield the root logger and restore its handlers and level afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
