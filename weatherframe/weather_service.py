# ABOUTME: Service layer for OpenWeatherMap API calls and response parsing.
# ABOUTME: Fetches current weather and the 5-day/3-hour forecast and maps them onto core models.

import logging

import httpx
from pydantic import ValidationError

from weatherframe import deps
from weatherframe.models import ForecastCity, ForecastResponse, RawForecastSample, RawWeatherReading

logger = logging.getLogger(__name__)

CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"
FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"

# Temperatures always come back in Fahrenheit; conversion happens at the display boundary
UNITS = "imperial"


class ProviderError(Exception):
    """The provider call failed or returned data that could not be parsed."""


async def get_current_weather(
    client: httpx.AsyncClient, latitude: float, longitude: float, api_key: str
) -> RawWeatherReading:
    """Fetch current conditions for a coordinate pair."""
    data = await _get_json(client, CURRENT_URL, latitude, longitude, api_key)
    try:
        return parse_current_weather(data)
    except (AttributeError, KeyError, TypeError, ValidationError) as e:
        raise ProviderError(f"Malformed current weather payload: {e}") from e


async def get_forecast(client: httpx.AsyncClient, latitude: float, longitude: float, api_key: str) -> ForecastResponse:
    """Fetch the 5-day/3-hour forecast for a coordinate pair."""
    data = await _get_json(client, FORECAST_URL, latitude, longitude, api_key)
    try:
        return parse_forecast(data)
    except (AttributeError, KeyError, TypeError, ValidationError) as e:
        raise ProviderError(f"Malformed forecast payload: {e}") from e


async def _get_json(client: httpx.AsyncClient, url: str, latitude: float, longitude: float, api_key: str) -> dict:
    params = {"lat": latitude, "lon": longitude, "units": UNITS, "appid": api_key}
    logger.debug("Fetching %s for %.4f,%.4f", url, latitude, longitude)
    try:
        async for attempt in deps.create_retrying():
            with attempt:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
    except httpx.HTTPError as e:
        raise ProviderError(f"Weather API request failed: {e}") from e

    try:
        data = resp.json()
    except ValueError as e:
        raise ProviderError(f"Weather API returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ProviderError(f"Weather API returned {type(data).__name__}, expected a JSON object")
    return data


def parse_current_weather(data: dict) -> RawWeatherReading:
    """Map an OpenWeatherMap current-weather object onto RawWeatherReading.

    An empty `weather` array leaves the condition fields empty. Zero sunrise/sunset become None.
    """
    condition = _first_condition(data)
    sys = data.get("sys") or {}
    return RawWeatherReading(
        location_name=data.get("name") or "",
        temperature_f=data["main"]["temp"],
        condition_main=condition.get("main") or "",
        condition_description=condition.get("description") or "",
        condition_id=condition.get("id") or 0,
        sunrise=sys.get("sunrise") or None,
        sunset=sys.get("sunset") or None,
        country=sys.get("country"),
    )


def parse_forecast(data: dict) -> ForecastResponse:
    """Map an OpenWeatherMap forecast object onto ForecastResponse."""
    city = data.get("city") or {}
    samples = []
    for item in data.get("list", []):
        condition = _first_condition(item)
        samples.append(
            RawForecastSample(
                timestamp=item["dt"],
                temperature_f=item["main"]["temp"],
                condition_main=condition.get("main") or "",
                condition_description=condition.get("description") or "",
                condition_icon=condition.get("icon") or "",
            )
        )
    return ForecastResponse(
        city=ForecastCity(
            name=city.get("name") or "",
            country=city.get("country"),
            sunrise=city.get("sunrise") or None,
            sunset=city.get("sunset") or None,
        ),
        samples=samples,
    )


def _first_condition(data: dict) -> dict:
    """Return the first entry of a `weather` array, or an empty dict if there is none."""
    weather = data.get("weather") or []
    if not weather:
        return {}
    return weather[0]
