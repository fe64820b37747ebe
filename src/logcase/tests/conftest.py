"""Shared fixtures for logcase tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest

from logcase import MemoryOutput, clear_settings_cache, reset_default_logger

FIXED_NOW = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clean_globals(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from LOGCASE_* env vars and cached globals."""
    for var in ("LOGCASE_LEVEL", "LOGCASE_FORMAT", "LOGCASE_TIMESTAMP", "LOGCASE_SERVICE"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    reset_default_logger()
    yield
    clear_settings_cache()
    reset_default_logger()


@pytest.fixture
def out() -> MemoryOutput:
    return MemoryOutput()


@pytest.fixture
def fixed_clock(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin the logger clock to 2024-01-01T00:00:00Z."""
    monkeypatch.setattr("logcase.runtime.logger.now", lambda: FIXED_NOW)
    return FIXED_NOW
