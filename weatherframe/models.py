# ABOUTME: Pydantic BaseModels and enums for raw provider readings and display-ready output.
# ABOUTME: Defines the structured types passed between the provider client and the derivation core.

from datetime import date
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

TemperatureUnit = Literal["F", "C"]
SpeedUnit = Literal["mph", "kmh", "ms"]
TimeFormat = Literal["12h", "24h"]
ThemeMode = Literal["auto", "light", "dark"]


class TimePeriod(StrEnum):
    NIGHT = "night"
    MORNING = "morning"
    DAY = "day"
    EVENING = "evening"


class WeatherType(StrEnum):
    CLEAR = "clear"
    RAIN = "rain"
    SNOW = "snow"
    FOG = "fog"
    CLOUDY = "cloudy"


class RawWeatherReading(BaseModel):
    """One current-weather observation as returned by the provider, temperatures in Fahrenheit.

    Empty condition strings mean the provider sent no `weather` entries.
    """

    model_config = ConfigDict(frozen=True)

    location_name: str = ""
    temperature_f: float
    condition_main: str = ""
    condition_description: str = ""
    condition_id: int = 0
    sunrise: int | None = None
    sunset: int | None = None
    country: str | None = None


class RawForecastSample(BaseModel):
    """One 3-hour forecast step from the provider."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    temperature_f: float
    condition_main: str = ""
    condition_description: str = ""
    condition_icon: str = ""


class ForecastCity(BaseModel):
    """City metadata attached to a forecast payload."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    country: str | None = None
    sunrise: int | None = None
    sunset: int | None = None


class ForecastResponse(BaseModel):
    """Parsed forecast payload: city metadata plus ordered samples."""

    model_config = ConfigDict(frozen=True)

    city: ForecastCity = ForecastCity()
    samples: list[RawForecastSample] = []


class DailyBucket(BaseModel):
    """Samples collected for one local calendar date before reduction."""

    date: date
    temperatures: list[float] = []
    conditions: list[RawForecastSample] = []


class DailyForecastSummary(BaseModel):
    """One row of the multi-day forecast display."""

    model_config = ConfigDict(frozen=True)

    date_label: str
    day_name: str
    condition_label: str
    temp_high: str
    temp_low: str
    icon_code: str


class DisplayWeather(BaseModel):
    """Display-ready current weather. Rebuilt from scratch on every reading."""

    model_config = ConfigDict(frozen=True)

    location: str
    temperature: str
    unit: str
    condition: str
    is_error: bool = False
    sunrise: str | None = None
    sunset: str | None = None


class UserUnitPreferences(BaseModel):
    """User display preferences. Read-only input to the core."""

    model_config = ConfigDict(frozen=True)

    temperature_unit: TemperatureUnit = "F"
    speed_unit: SpeedUnit = "mph"
    time_format: TimeFormat = "12h"
    theme_mode: ThemeMode = "auto"


class Dashboard(BaseModel):
    """Everything a renderer needs for one refresh of the screen."""

    model_config = ConfigDict(frozen=True)

    display: DisplayWeather
    time_period: TimePeriod
    weather_type: WeatherType
    forecast: list[DailyForecastSummary] = []
    forecast_error: str | None = None
    dark_mode: bool = False
    background_video: str
