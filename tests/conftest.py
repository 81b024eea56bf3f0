from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from last_hour_counter.clock import SequenceClock

# Widths exercised against scripted timelines.
BUCKET_WIDTHS = [1, 2, 3, 4, 5, 6, 10, 12]
ALL_BUCKET_WIDTHS = [1, 2, 3, 4, 5, 6, 10, 12, 15, 20, 30, 60]

NOW = 1_700_000_000


def minutes_ago(minutes: int, now: int = NOW) -> int:
    return now - minutes * 60


def make_clock(*times: int) -> SequenceClock:
    """Clock scripted for init, then one call per counter operation."""
    return SequenceClock(times)


@pytest.fixture(autouse=True)
def _clear_counter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment from leaking into settings."""
    monkeypatch.delenv("LAST_HOUR_COUNTER_BUCKET_WIDTH_MINUTES", raising=False)
    monkeypatch.delenv("LAST_HOUR_COUNTER_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
