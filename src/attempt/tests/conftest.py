"""Shared fixtures for attempt tests."""

from __future__ import annotations

import pytest

from attempt import Err, Ok, Result, clear_settings_cache
from attempt.retry import executor

_ENV_VARS = ("ATTEMPT_MAX_TRIES", "ATTEMPT_INITIAL_DELAY", "ATTEMPT_DELAY_GROWTH")


class Flaky:
    """Operation failing `failures` times, then succeeding with `value`.
    
    Each failure carries its call number so tests can tell which error surfaced.
    """
    
    def __init__(self, failures: int, value: object = 42) -> None:
        self.failures = failures
        self.value = value
        self.calls = 0
    
    def __call__(self) -> Result[object, str]:
        self.calls += 1
        if self.calls <= self.failures:
            return Err(f"fail-{self.calls}")
        return Ok(self.value)


class AsyncFlaky(Flaky):
    """Coroutine-function variant of Flaky."""
    
    async def __call__(self) -> Result[object, str]:  # type: ignore[override]
        return super().__call__()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate tests from ATTEMPT_* variables and the cached settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record blocking sleeps instead of waiting."""
    recorded: list[float] = []
    monkeypatch.setattr(executor.time, "sleep", recorded.append)
    return recorded
