from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from last_hour_counter.counter import check_bucket_width


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LAST_HOUR_COUNTER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Counter
    bucket_width_minutes: int = 4

    # App
    log_level: str = "INFO"

    @field_validator("bucket_width_minutes")
    @classmethod
    def check_divides_hour(cls, v: int) -> int:
        check_bucket_width(v)
        return v


def get_settings() -> Settings:
    return Settings()
