# ABOUTME: Builds the display-ready current-weather record from a raw provider reading.
# ABOUTME: Converts failures and malformed readings into renderable placeholder states.

from datetime import UTC, datetime, tzinfo

from weatherframe.models import DisplayWeather, RawWeatherReading, TimePeriod, UserUnitPreferences
from weatherframe.time_period import classify_time_period
from weatherframe.units import PLACEHOLDER, format_epoch_to_local_clock, format_temperature

ERROR_LOCATION = "Error"
ERROR_CONDITION = "Unable to load"
UNAVAILABLE_CONDITION = "Weather data unavailable"


def capitalize_first(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def error_display(prefs: UserUnitPreferences) -> DisplayWeather:
    """Placeholder shown when the provider failed or returned nothing."""
    return DisplayWeather(
        location=ERROR_LOCATION,
        temperature=PLACEHOLDER,
        unit=f"°{prefs.temperature_unit}",
        condition=ERROR_CONDITION,
        is_error=True,
        sunrise=PLACEHOLDER,
        sunset=PLACEHOLDER,
    )


def build_display(
    reading: RawWeatherReading | None,
    error: BaseException | str | None = None,
    prefs: UserUnitPreferences | None = None,
    now: datetime | None = None,
    tz: tzinfo = UTC,
) -> tuple[DisplayWeather, TimePeriod]:
    """Turn one raw reading into a DisplayWeather plus the current time period.

    Never raises for bad data: a provider error or missing reading yields the error display,
    a reading without conditions yields the "Weather data unavailable" display. The time period
    uses the reading's sunrise/sunset when there is a usable reading and the hour table otherwise.
    """
    prefs = prefs or UserUnitPreferences()
    if now is None:
        now = datetime.now(tz)
    unit = f"°{prefs.temperature_unit}"

    if error or reading is None:
        return error_display(prefs), classify_time_period(now, tz=tz)

    if not reading.condition_main and not reading.condition_description:
        display = DisplayWeather(
            location=reading.location_name or "Unknown",
            temperature=PLACEHOLDER,
            unit=unit,
            condition=UNAVAILABLE_CONDITION,
            is_error=True,
            sunrise=PLACEHOLDER,
            sunset=PLACEHOLDER,
        )
        return display, classify_time_period(now, tz=tz)

    display = DisplayWeather(
        location=reading.location_name or "Unknown Location",
        temperature=format_temperature(reading.temperature_f, "F", prefs.temperature_unit),
        unit=unit,
        condition=capitalize_first(reading.condition_description or reading.condition_main),
        is_error=False,
        sunrise=format_epoch_to_local_clock(reading.sunrise, prefs.time_format, tz),
        sunset=format_epoch_to_local_clock(reading.sunset, prefs.time_format, tz),
    )
    return display, classify_time_period(now, reading.sunrise, reading.sunset, tz)
