from __future__ import annotations

from last_hour_counter.clock import TimeSource
from last_hour_counter.config import Settings, get_settings
from last_hour_counter.counter import SlidingWindowCounter
from last_hour_counter.logging import setup_logging


def configure(settings: Settings | None = None) -> Settings:
    """Load settings and set up logging at the configured level.

    Call once at application startup, before creating counters.
    """
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level)
    return settings


def create_counter(
    settings: Settings | None = None, clock: TimeSource | None = None
) -> SlidingWindowCounter:
    """Create a counter configured from settings (loaded from the environment if omitted)."""
    if settings is None:
        settings = get_settings()
    return SlidingWindowCounter(
        bucket_width_minutes=settings.bucket_width_minutes,
        clock=clock,
    )
