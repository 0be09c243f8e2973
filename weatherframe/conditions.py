# ABOUTME: Maps free-text provider condition strings to a coarse weather type.
# ABOUTME: Ordered keyword rules, first match wins, unknown text counts as clear.

from weatherframe.models import WeatherType

# Order matters: condition strings can contain several overlapping keywords,
# so rain-family words precede cloud words and multi-word cloud phrases precede "clouds".
CONDITION_RULES: tuple[tuple[tuple[str, ...], WeatherType], ...] = (
    (("thunderstorm",), WeatherType.RAIN),
    (("drizzle",), WeatherType.RAIN),
    (("rain",), WeatherType.RAIN),
    (("snow",), WeatherType.SNOW),
    (("mist", "fog", "haze", "smoke", "dust", "sand"), WeatherType.FOG),
    (("overcast",), WeatherType.CLOUDY),
    (("broken clouds",), WeatherType.CLOUDY),
    (("scattered clouds",), WeatherType.CLOUDY),
    (("few clouds",), WeatherType.CLEAR),
    (("clouds",), WeatherType.CLOUDY),
    (("clear", "sunny"), WeatherType.CLEAR),
)


def classify_weather_type(condition_text: str | None) -> WeatherType:
    """Classify a condition like "light rain" or "scattered clouds" into a WeatherType."""
    if not condition_text:
        return WeatherType.CLEAR

    text = condition_text.lower()
    for keywords, weather_type in CONDITION_RULES:
        if any(keyword in text for keyword in keywords):
            return weather_type
    return WeatherType.CLEAR
