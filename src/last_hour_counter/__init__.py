"""Fixed-memory counter of events seen in the trailing hour.

Events are grouped into fixed-width time buckets that are rotated forward
lazily whenever the counter is touched.
"""

from __future__ import annotations

from last_hour_counter.clock import SequenceClock, TimeSource, WallClock
from last_hour_counter.counter import InvalidBucketWidthError, SlidingWindowCounter
from last_hour_counter.models import CounterSnapshot

__all__ = [
    "CounterSnapshot",
    "InvalidBucketWidthError",
    "SequenceClock",
    "SlidingWindowCounter",
    "TimeSource",
    "WallClock",
]
