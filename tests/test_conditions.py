# ABOUTME: Contract tests for condition-string to weather-type classification.
# ABOUTME: Checks keyword precedence where condition strings overlap.

import pytest

from weatherframe.conditions import classify_weather_type
from weatherframe.models import WeatherType


class TestClassifyWeatherType:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("light intensity drizzle", WeatherType.RAIN),
            ("thunderstorm with light rain", WeatherType.RAIN),
            ("moderate rain", WeatherType.RAIN),
            ("light snow", WeatherType.SNOW),
            ("mist", WeatherType.FOG),
            ("Haze", WeatherType.FOG),
            ("sand/dust whirls", WeatherType.FOG),
            ("overcast clouds", WeatherType.CLOUDY),
            ("broken clouds", WeatherType.CLOUDY),
            ("scattered clouds", WeatherType.CLOUDY),
            ("few clouds", WeatherType.CLEAR),
            ("Clouds", WeatherType.CLOUDY),
            ("clear sky", WeatherType.CLEAR),
            ("Sunny", WeatherType.CLEAR),
        ],
    )
    def test_provider_conditions(self, text, expected):
        assert classify_weather_type(text) == expected

    def test_rain_beats_clouds(self):
        """Rain keywords win over cloud keywords in the same string.

        Implementation: Classifies a string containing both "rain" and "clouds".
        Passing implies: Rule order is respected, first match wins.
        """
        assert classify_weather_type("rain and broken clouds") == WeatherType.RAIN

    def test_few_clouds_counts_as_clear(self):
        """Light cloud cover is visually clear.

        Implementation: Classifies "few clouds" against the generic "clouds" rule.
        Passing implies: The specific phrase is checked before the generic fallback.
        """
        assert classify_weather_type("few clouds") == WeatherType.CLEAR

    def test_empty_and_missing_are_clear(self):
        assert classify_weather_type("") == WeatherType.CLEAR
        assert classify_weather_type(None) == WeatherType.CLEAR

    def test_unrecognized_is_clear(self):
        assert classify_weather_type("volcanic ash") == WeatherType.CLEAR
