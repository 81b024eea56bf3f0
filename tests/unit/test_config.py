from __future__ import annotations

import pytest
from pydantic import ValidationError

from last_hour_counter.config import Settings, get_settings


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.bucket_width_minutes == 4
    assert settings.log_level == "INFO"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAST_HOUR_COUNTER_BUCKET_WIDTH_MINUTES", "15")
    monkeypatch.setenv("LAST_HOUR_COUNTER_LOG_LEVEL", "DEBUG")
    settings = get_settings()
    assert settings.bucket_width_minutes == 15
    assert settings.log_level == "DEBUG"


def test_unprefixed_env_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUCKET_WIDTH_MINUTES", "10")
    assert Settings().bucket_width_minutes == 4


@pytest.mark.parametrize("width", ["8", "0", "-5", "90"])
def test_invalid_bucket_width_from_env(monkeypatch: pytest.MonkeyPatch, width: str) -> None:
    monkeypatch.setenv("LAST_HOUR_COUNTER_BUCKET_WIDTH_MINUTES", width)
    with pytest.raises(ValidationError, match="divisor of 60"):
        get_settings()


def test_invalid_bucket_width_direct() -> None:
    with pytest.raises(ValidationError, match="Minutes in bucket should be a divisor of 60"):
        Settings(bucket_width_minutes=7)
