# ABOUTME: Shared test fixtures for the weatherframe test suite.
# ABOUTME: Disables retry backoff and provides common readings and preferences.

from datetime import UTC, datetime

import pytest
from tenacity import wait_none

from weatherframe import deps
from weatherframe.models import RawWeatherReading, UserUnitPreferences


def epoch(*args: int) -> int:
    """Unix seconds for a UTC wall-clock time, e.g. epoch(2024, 1, 15, 6)."""
    return int(datetime(*args, tzinfo=UTC).timestamp())


@pytest.fixture(autouse=True)
def _no_retry_wait(monkeypatch):
    # Retries still happen, they just don't sleep
    monkeypatch.setattr(deps, "RETRY_WAIT", wait_none())


@pytest.fixture
def prefs() -> UserUnitPreferences:
    return UserUnitPreferences()


@pytest.fixture
def seattle_reading() -> RawWeatherReading:
    return RawWeatherReading(
        location_name="Seattle",
        temperature_f=68.4,
        condition_main="Clouds",
        condition_description="scattered clouds",
        condition_id=802,
        sunrise=epoch(2024, 1, 15, 6),
        sunset=epoch(2024, 1, 15, 18),
        country="US",
    )
