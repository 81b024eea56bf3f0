from __future__ import annotations

from collections import deque

import structlog

from last_hour_counter.clock import TimeSource, WallClock
from last_hour_counter.models import CounterSnapshot

logger = structlog.get_logger()

WINDOW_MINUTES = 60
WINDOW_SECONDS = WINDOW_MINUTES * 60
DEFAULT_BUCKET_WIDTH_MINUTES = 4


class InvalidBucketWidthError(ValueError):
    """Raised when the bucket width cannot partition the hour evenly."""


def check_bucket_width(minutes: int) -> None:
    """Raise InvalidBucketWidthError unless ``minutes`` is a positive int dividing 60."""
    if (
        isinstance(minutes, bool)
        or not isinstance(minutes, int)
        or minutes <= 0
        or WINDOW_MINUTES % minutes != 0
    ):
        raise InvalidBucketWidthError("Minutes in bucket should be a divisor of 60")


class SlidingWindowCounter:
    """Counts events seen during the last hour.

    The hour is split into ``60 / bucket_width_minutes`` buckets. The last
    bucket always receives new events; the whole row is shifted forward on
    every call before anything is read or written, so an idle counter costs
    nothing. Not thread-safe: share it behind a lock.

    Args:
        bucket_width_minutes: Width of a single bucket, must divide 60.
        clock: Time source, the system clock when omitted.
    """

    def __init__(
        self,
        bucket_width_minutes: int = DEFAULT_BUCKET_WIDTH_MINUTES,
        clock: TimeSource | None = None,
    ) -> None:
        check_bucket_width(bucket_width_minutes)
        self._bucket_width_minutes = bucket_width_minutes
        self._bucket_seconds = bucket_width_minutes * 60
        self._clock: TimeSource = clock if clock is not None else WallClock()

        bucket_count = WINDOW_MINUTES // bucket_width_minutes
        self._buckets: deque[int] = deque([0] * bucket_count, maxlen=bucket_count)
        self._window_start = self._clock.current_time() - WINDOW_SECONDS

        logger.debug(
            "counter_created",
            bucket_width_minutes=bucket_width_minutes,
            bucket_count=bucket_count,
        )

    @property
    def bucket_width_minutes(self) -> int:
        return self._bucket_width_minutes

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def window_start(self) -> int:
        return self._window_start

    @property
    def clock(self) -> TimeSource:
        return self._clock

    def increment(self, amount: int = 1) -> None:
        """Record ``amount`` events at the current time."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"amount must be an int, got {type(amount).__name__}")
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        self._adjust_to(self._clock.current_time())
        self._buckets[-1] += amount

    def value(self) -> int:
        """Return the number of events within the trailing hour."""
        self._adjust_to(self._clock.current_time())
        return sum(self._buckets)

    def snapshot(self) -> CounterSnapshot:
        self._adjust_to(self._clock.current_time())
        buckets = tuple(self._buckets)
        return CounterSnapshot(
            bucket_width_minutes=self._bucket_width_minutes,
            window_start=self._window_start,
            buckets=buckets,
            total=sum(buckets),
        )

    def _adjust_to(self, now: int) -> None:
        """Drop buckets that slid out of the hour ending at ``now``."""
        hour_ago = now - WINDOW_SECONDS
        if hour_ago < self._window_start:
            return

        minutes_elapsed = (hour_ago - self._window_start) // 60
        # Always advance at least one bucket once the lower edge is reached.
        shift = minutes_elapsed // self._bucket_width_minutes + 1
        self._window_start += shift * self._bucket_seconds

        # maxlen drops the oldest buckets as zeros are appended.
        self._buckets.extend([0] * min(shift, len(self._buckets)))

        logger.debug("counter_rotated", shift=shift, window_start=self._window_start)
