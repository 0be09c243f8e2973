# ABOUTME: Classifies a moment into night, morning, day, or evening.
# ABOUTME: Uses sunrise/sunset epochs when usable and a fixed local-hour table otherwise.

import logging
import math
from datetime import UTC, datetime, tzinfo

from weatherframe.models import TimePeriod

logger = logging.getLogger(__name__)

MIN_MORNING_SECONDS = 3600
EVENING_START_HOUR = 18
EVENING_END_HOUR = 20


def time_period_from_hour(hour: int) -> TimePeriod:
    """Hour-table fallback: [21,5) night, [5,11) morning, [11,18) day, [18,21) evening."""
    if hour >= 21 or hour < 5:
        return TimePeriod.NIGHT
    if hour < 11:
        return TimePeriod.MORNING
    if hour < 18:
        return TimePeriod.DAY
    return TimePeriod.EVENING


def _to_local(now: datetime, tz: tzinfo) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=tz)
    return now.astimezone(tz)


def _at_hour(local_now: datetime, hour: int) -> int:
    return math.floor(local_now.replace(hour=hour, minute=0, second=0, microsecond=0).timestamp())


def classify_time_period(
    now: datetime,
    sunrise: int | None = None,
    sunset: int | None = None,
    tz: tzinfo = UTC,
) -> TimePeriod:
    """Return the time period of `now` given optional sunrise/sunset epochs (UTC seconds).

    Morning lasts a third of the daylight span, and never less than an hour. When sunset falls
    at or before 8pm local time, evening runs from sunset to 8pm; otherwise it runs from 6pm to
    sunset. Missing, non-positive, or inverted sunrise/sunset fall back to the hour table.
    """
    local_now = _to_local(now, tz)

    if not sunrise or not sunset or sunrise <= 0 or sunset <= 0:
        return time_period_from_hour(local_now.hour)

    if sunrise >= sunset:
        logger.warning(
            "Invalid sunrise/sunset (%d >= %d), falling back to hour-based time period", sunrise, sunset
        )
        return time_period_from_hour(local_now.hour)

    now_ts = math.floor(local_now.timestamp())
    sunset_hour = datetime.fromtimestamp(sunset, tz).hour

    if sunset_hour <= EVENING_END_HOUR:
        evening_start = sunset
        evening_end = _at_hour(local_now, EVENING_END_HOUR)
    else:
        evening_start = _at_hour(local_now, EVENING_START_HOUR)
        evening_end = sunset

    day_length = sunset - sunrise
    morning_end = sunrise + max(day_length / 3, MIN_MORNING_SECONDS)

    if now_ts < sunrise:
        return TimePeriod.NIGHT
    if now_ts < morning_end:
        return TimePeriod.MORNING
    if now_ts < evening_start:
        return TimePeriod.DAY
    if now_ts < evening_end:
        return TimePeriod.EVENING
    return TimePeriod.NIGHT
