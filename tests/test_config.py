# ABOUTME: Contract tests for loading settings from the environment.
# ABOUTME: Verifies defaults, overrides, and validation of bad values.

import pytest
from pydantic import ValidationError

from weatherframe.config import FALLBACK_LAT, FALLBACK_LON, Settings, load_settings

ENV_VARS = (
    "OPENWEATHER_API_KEY",
    "WEATHER_LAT",
    "WEATHER_LON",
    "WEATHER_TIMEZONE",
    "WEATHER_HTTP_TIMEOUT",
    "WEATHER_TEMPERATURE_UNIT",
    "WEATHER_SPEED_UNIT",
    "WEATHER_TIME_FORMAT",
    "WEATHER_THEME_MODE",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        """With no environment, settings fall back to Bellevue, UTC, and imperial units.

        Implementation: Clears all weather env vars and loads settings.
        Passing implies: The app starts without any configuration.
        """
        settings = load_settings()

        assert settings.api_key == ""
        assert settings.latitude == FALLBACK_LAT
        assert settings.longitude == FALLBACK_LON
        assert settings.timezone == "UTC"
        assert settings.preferences.temperature_unit == "F"
        assert settings.preferences.time_format == "12h"

    def test_reads_environment(self, clean_env):
        """Environment variables override every default.

        Implementation: Sets each variable and loads settings.
        Passing implies: String env values are coerced to the right types.
        """
        clean_env.setenv("OPENWEATHER_API_KEY", "abc123")
        clean_env.setenv("WEATHER_LAT", "55.6761")
        clean_env.setenv("WEATHER_LON", "12.5683")
        clean_env.setenv("WEATHER_TIMEZONE", "Europe/Copenhagen")
        clean_env.setenv("WEATHER_HTTP_TIMEOUT", "2.5")
        clean_env.setenv("WEATHER_TEMPERATURE_UNIT", "C")
        clean_env.setenv("WEATHER_SPEED_UNIT", "kmh")
        clean_env.setenv("WEATHER_TIME_FORMAT", "24h")
        clean_env.setenv("WEATHER_THEME_MODE", "dark")

        settings = load_settings()

        assert settings.api_key == "abc123"
        assert settings.latitude == 55.6761
        assert settings.longitude == 12.5683
        assert settings.tz.key == "Europe/Copenhagen"
        assert settings.http_timeout == 2.5
        assert settings.preferences.temperature_unit == "C"
        assert settings.preferences.speed_unit == "kmh"
        assert settings.preferences.time_format == "24h"
        assert settings.preferences.theme_mode == "dark"

    def test_unset_units_are_left_for_country_defaults(self, clean_env):
        """Units not given in the environment are not marked as explicitly set.

        Implementation: Sets only the time format and inspects model_fields_set.
        Passing implies: The dashboard can tell configured units from defaults.
        """
        clean_env.setenv("WEATHER_TIME_FORMAT", "24h")
        settings = load_settings()

        assert settings.preferences.model_fields_set == {"time_format"}
        assert settings.preferences.temperature_unit == "F"

    def test_empty_variable_counts_as_unset(self, clean_env):
        clean_env.setenv("WEATHER_SPEED_UNIT", "")
        assert "speed_unit" not in load_settings().preferences.model_fields_set

    def test_rejects_bad_unit(self, clean_env):
        clean_env.setenv("WEATHER_TEMPERATURE_UNIT", "K")
        with pytest.raises(ValidationError):
            load_settings()

    def test_rejects_unknown_timezone(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            Settings(timezone="Mars/Olympus_Mons")
