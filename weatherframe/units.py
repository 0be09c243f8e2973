# ABOUTME: Unit conversion and formatting for temperature, wind speed, and clock times.
# ABOUTME: Also picks default display units from a provider country code.

import logging
import math
from datetime import UTC, datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal

from weatherframe.models import SpeedUnit, TemperatureUnit, TimeFormat, UserUnitPreferences

logger = logging.getLogger(__name__)

PLACEHOLDER = "--"

MPH_TO_MS = 0.44704
KMH_TO_MS = 0.277778
MS_TO_MPH = 2.23694
MS_TO_KMH = 3.6

# ISO 3166-1 alpha-2 codes of countries that primarily use Fahrenheit and mph
IMPERIAL_COUNTRIES = frozenset({"US", "BS", "BZ", "KY", "LR", "PW", "FM", "MH"})


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    # Decimal(float) is exact: 0.49999999999999994 stays below the tie
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    return round_half_away((fahrenheit - 32) * 5 / 9)


def celsius_to_fahrenheit(celsius: float) -> int:
    return round_half_away(celsius * 9 / 5 + 32)


def format_temperature(value: float | None, source_unit: TemperatureUnit, target_unit: TemperatureUnit) -> str:
    """Format a temperature in the target unit as a rounded integer string.

    None and non-finite values are treated as 0 so the result is always renderable.
    """
    if value is None or not math.isfinite(value):
        value = 0.0

    if source_unit == target_unit:
        return str(round_half_away(value))
    if source_unit == "F" and target_unit == "C":
        return str(fahrenheit_to_celsius(value))
    if source_unit == "C" and target_unit == "F":
        return str(celsius_to_fahrenheit(value))
    return str(round_half_away(value))


def convert_speed(value: float, source_unit: SpeedUnit, target_unit: SpeedUnit) -> int:
    """Convert a wind speed between mph, km/h and m/s, going through m/s."""
    if source_unit == target_unit:
        return round_half_away(value)

    ms = value
    if source_unit == "mph":
        ms = value * MPH_TO_MS
    elif source_unit == "kmh":
        ms = value * KMH_TO_MS

    if target_unit == "mph":
        return round_half_away(ms * MS_TO_MPH)
    if target_unit == "kmh":
        return round_half_away(ms * MS_TO_KMH)
    return round_half_away(ms)


def format_epoch_to_local_clock(epoch: int | None, time_format: TimeFormat = "12h", tz: tzinfo = UTC) -> str:
    """Render a unix timestamp as a wall-clock string in `tz`.

    "12h" gives e.g. "6:30pm", "24h" gives "18:30". A missing or zero timestamp gives "--".
    """
    if not epoch:
        return PLACEHOLDER

    local = datetime.fromtimestamp(epoch, tz)
    if time_format == "24h":
        return f"{local.hour:02d}:{local.minute:02d}"

    hour = local.hour % 12 or 12
    suffix = "am" if local.hour < 12 else "pm"
    return f"{hour}:{local.minute:02d}{suffix}"


def is_imperial_country(country_code: str | None) -> bool:
    if not country_code:
        return False
    return country_code.upper() in IMPERIAL_COUNTRIES


def default_units_for_country(country_code: str | None) -> tuple[TemperatureUnit, SpeedUnit]:
    """Pick default (temperature, speed) units for a country, metric unless known imperial."""
    if not country_code:
        logger.debug("No country code provided, defaulting to metric")
        return "C", "kmh"

    imperial = is_imperial_country(country_code)
    logger.debug("Country %s uses %s units", country_code, "imperial" if imperial else "metric")
    if imperial:
        return "F", "mph"
    return "C", "kmh"


def apply_country_defaults(prefs: UserUnitPreferences, country_code: str | None) -> UserUnitPreferences:
    """Fill temperature and speed units the user never set from the reading's country.

    Explicitly set fields (those in `prefs.model_fields_set`) always win. Without a country code
    the preferences are returned unchanged.
    """
    if not country_code:
        return prefs

    temperature_unit, speed_unit = default_units_for_country(country_code)
    update = {}
    if "temperature_unit" not in prefs.model_fields_set:
        update["temperature_unit"] = temperature_unit
    if "speed_unit" not in prefs.model_fields_set:
        update["speed_unit"] = speed_unit
    if not update:
        return prefs
    return prefs.model_copy(update=update)
