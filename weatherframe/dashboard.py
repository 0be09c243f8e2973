# ABOUTME: Fetches current weather and forecast and assembles everything a screen refresh needs.
# ABOUTME: Provider failures are absorbed here and turned into error display states.

import asyncio
import logging
from datetime import UTC, datetime, tzinfo

from weatherframe.conditions import classify_weather_type
from weatherframe.config import Settings, load_settings
from weatherframe.deps import ProviderDeps, create_http_client
from weatherframe.display import build_display
from weatherframe.forecast import aggregate_forecast
from weatherframe.models import (
    Dashboard,
    ForecastCity,
    RawForecastSample,
    RawWeatherReading,
    UserUnitPreferences,
    WeatherType,
)
from weatherframe.theme import background_video_for, is_dark_mode
from weatherframe.time_period import classify_time_period
from weatherframe.units import apply_country_defaults
from weatherframe.weather_service import ProviderError, get_current_weather, get_forecast

logger = logging.getLogger(__name__)

MISSING_API_KEY = "API key is missing"


def build_dashboard(
    reading: RawWeatherReading | None,
    forecast_samples: list[RawForecastSample],
    prefs: UserUnitPreferences,
    now: datetime,
    tz: tzinfo = UTC,
    error: BaseException | str | None = None,
    forecast_error: str | None = None,
    city: ForecastCity | None = None,
) -> Dashboard:
    """Assemble a Dashboard from already-fetched data. Pure given its arguments.

    Temperature and speed units the user never set follow the reading's country, or the forecast
    city's when there is no reading. Without a reading, the forecast city's sunrise and sunset
    place the time period instead of the hour table.
    """
    country = reading.country if reading is not None else None
    if not country and city is not None:
        country = city.country
    prefs = apply_country_defaults(prefs, country)

    display, time_period = build_display(reading, error, prefs, now, tz)
    if reading is None and city is not None:
        time_period = classify_time_period(now, city.sunrise, city.sunset, tz)
    weather_type = WeatherType.CLEAR if display.is_error else classify_weather_type(display.condition)

    return Dashboard(
        display=display,
        time_period=time_period,
        weather_type=weather_type,
        forecast=aggregate_forecast(forecast_samples, prefs.temperature_unit, tz),
        forecast_error=forecast_error,
        dark_mode=is_dark_mode(prefs.theme_mode, time_period),
        background_video=background_video_for(time_period),
    )


async def load_dashboard(deps: ProviderDeps, now: datetime | None = None) -> Dashboard:
    """Fetch current weather and forecast concurrently and build the Dashboard.

    Never raises ProviderError: a failed current-weather call yields the error display, a failed
    forecast call yields an empty forecast with `forecast_error` set.
    """
    settings = deps.settings
    tz = settings.tz
    if now is None:
        now = datetime.now(tz)

    if not settings.api_key:
        logger.error("OpenWeatherMap API key is missing")
        return build_dashboard(
            None, [], settings.preferences, now, tz, error=MISSING_API_KEY, forecast_error=MISSING_API_KEY
        )

    current, forecast = await asyncio.gather(
        get_current_weather(deps.http_client, settings.latitude, settings.longitude, settings.api_key),
        get_forecast(deps.http_client, settings.latitude, settings.longitude, settings.api_key),
        return_exceptions=True,
    )

    reading = None
    error = None
    if isinstance(current, ProviderError):
        logger.warning("Error fetching weather: %s", current)
        error = current
    elif isinstance(current, BaseException):
        raise current
    else:
        reading = current

    samples: list[RawForecastSample] = []
    city = None
    forecast_error = None
    if isinstance(forecast, ProviderError):
        logger.warning("Error fetching forecast: %s", forecast)
        forecast_error = str(forecast)
    elif isinstance(forecast, BaseException):
        raise forecast
    else:
        samples = forecast.samples
        city = forecast.city

    return build_dashboard(reading, samples, settings.preferences, now, tz, error, forecast_error, city)


async def refresh_dashboard(settings: Settings | None = None, now: datetime | None = None) -> Dashboard:
    """One-shot refresh: load settings if needed, open a client, and load the dashboard."""
    settings = settings or load_settings()
    async with create_http_client(settings.http_timeout) as client:
        return await load_dashboard(ProviderDeps(http_client=client, settings=settings), now)
