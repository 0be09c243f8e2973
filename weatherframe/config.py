# ABOUTME: Runtime settings read from environment variables and an optional .env file.
# ABOUTME: Holds the provider API key, location, timezone, and the user's unit preferences.

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from weatherframe.models import UserUnitPreferences

# Bellevue, WA, used when no location is configured
FALLBACK_LAT = 47.58531518716315
FALLBACK_LON = -122.14778448861998

# Preference field -> environment variable. Unset variables leave the field out of
# `model_fields_set`, so temperature and speed units can follow the reading's country.
PREFERENCE_ENV_VARS = {
    "temperature_unit": "WEATHER_TEMPERATURE_UNIT",
    "speed_unit": "WEATHER_SPEED_UNIT",
    "time_format": "WEATHER_TIME_FORMAT",
    "theme_mode": "WEATHER_THEME_MODE",
}


class Settings(BaseModel):
    """Application settings. Invalid values fail validation at load time."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    latitude: float = FALLBACK_LAT
    longitude: float = FALLBACK_LON
    timezone: str = "UTC"
    http_timeout: float = 10.0
    preferences: UserUnitPreferences = UserUnitPreferences()

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def load_settings() -> Settings:
    """Build Settings from the process environment after loading .env if present."""
    load_dotenv()

    return Settings(
        api_key=os.environ.get("OPENWEATHER_API_KEY", ""),
        latitude=os.environ.get("WEATHER_LAT", FALLBACK_LAT),
        longitude=os.environ.get("WEATHER_LON", FALLBACK_LON),
        timezone=os.environ.get("WEATHER_TIMEZONE", "UTC"),
        http_timeout=os.environ.get("WEATHER_HTTP_TIMEOUT", 10.0),
        preferences=UserUnitPreferences(
            **{field: os.environ[name] for field, name in PREFERENCE_ENV_VARS.items() if os.environ.get(name)}
        ),
    )
