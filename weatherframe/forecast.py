# ABOUTME: Collapses the provider's 3-hour forecast samples into one summary per calendar day.
# ABOUTME: Computes daily high/low in the user's unit and labels each day for display.

from datetime import UTC, date, datetime, tzinfo

from weatherframe.display import capitalize_first
from weatherframe.models import DailyBucket, DailyForecastSummary, RawForecastSample, TemperatureUnit
from weatherframe.units import format_temperature

MAX_FORECAST_DAYS = 5

# English names independent of the process locale
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def group_by_date(samples: list[RawForecastSample], tz: tzinfo = UTC) -> list[DailyBucket]:
    """Group samples by local calendar date, keeping first-seen date order."""
    buckets: dict[date, DailyBucket] = {}
    for sample in samples:
        day = datetime.fromtimestamp(sample.timestamp, tz).date()
        bucket = buckets.get(day)
        if bucket is None:
            bucket = buckets[day] = DailyBucket(date=day)
        bucket.temperatures.append(sample.temperature_f)
        bucket.conditions.append(sample)
    return list(buckets.values())


def summarize_day(bucket: DailyBucket, temperature_unit: TemperatureUnit) -> DailyForecastSummary:
    """Reduce one day's bucket to a summary. The first sample of the day supplies the condition."""
    primary = bucket.conditions[0]
    return DailyForecastSummary(
        date_label=f"{MONTH_ABBREVIATIONS[bucket.date.month - 1]} {bucket.date.day}",
        day_name=DAY_NAMES[bucket.date.weekday()],
        condition_label=capitalize_first(primary.condition_description),
        temp_high=format_temperature(max(bucket.temperatures), "F", temperature_unit),
        temp_low=format_temperature(min(bucket.temperatures), "F", temperature_unit),
        icon_code=primary.condition_icon,
    )


def aggregate_forecast(
    samples: list[RawForecastSample],
    temperature_unit: TemperatureUnit = "F",
    tz: tzinfo = UTC,
) -> list[DailyForecastSummary]:
    """Turn a 5-day/3-hour sample feed into at most five daily summaries, in date order."""
    buckets = group_by_date(samples, tz)[:MAX_FORECAST_DAYS]
    return [summarize_day(bucket, temperature_unit) for bucket in buckets]
