from __future__ import annotations

import time
from collections.abc import Iterable
from typing import Protocol


class TimeSource(Protocol):
    """Protocol for anything that can tell the current Unix time."""

    def current_time(self) -> int: ...


class WallClock:
    """Time source backed by the system clock."""

    def current_time(self) -> int:
        return int(time.time())


class SequenceClock:
    """Deterministic time source that replays a prepared list of timestamps.

    Each call hands out the next value. Asking for more values than were
    prepared raises, since it means the caller and the script disagree.
    """

    def __init__(self, times: Iterable[int]) -> None:
        self._times = list(times)
        self._index = 0

    def current_time(self) -> int:
        if self._index >= len(self._times):
            raise RuntimeError("unexpected current_time call")
        value = self._times[self._index]
        self._index += 1
        return value

    @property
    def calls(self) -> int:
        return self._index

    @property
    def remaining(self) -> int:
        return len(self._times) - self._index
