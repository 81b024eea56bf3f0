from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CounterSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    bucket_width_minutes: int
    window_start: int
    buckets: tuple[int, ...]
    total: int
