# ABOUTME: Pure theme and background decisions derived from the time period.
# ABOUTME: Callers apply the result; nothing here touches global state.

from weatherframe.models import ThemeMode, TimePeriod

BACKGROUND_VIDEOS = {
    TimePeriod.NIGHT: "LosAngelesNight.mp4",
    TimePeriod.MORNING: "OregonSunset.mp4",
    TimePeriod.DAY: "HawaiiValley.mp4",
    TimePeriod.EVENING: "LosAngelesSunset.mp4",
}


def is_dark_mode(theme_mode: ThemeMode, time_period: TimePeriod | None) -> bool:
    """Decide dark vs light. "auto" goes dark in the evening and at night."""
    if theme_mode == "light":
        return False
    if theme_mode == "dark":
        return True
    if time_period is None:
        return False
    return time_period in (TimePeriod.EVENING, TimePeriod.NIGHT)


def background_video_for(time_period: TimePeriod) -> str:
    return BACKGROUND_VIDEOS[time_period]
