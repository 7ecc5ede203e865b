"""WeatherReport model and unit conversions."""

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skycast.errors import ParseError


# 16-point compass, each sector 22.5 degrees wide and centred on its label
COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

# Shown when the provider omits the wind bearing
UNKNOWN_DIRECTION = "-"

WEATHER_EMOJI = {
    "clear": "☀️",
    "clouds": "☁️",
    "rain": "🌧️",
    "snow": "❄️",
    "thunderstorm": "⛈️",
    "drizzle": "🌦️",
    "mist": "🌫️",
    "fog": "🌫️",
}
DEFAULT_EMOJI = "🌡️"


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - 273.15


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return (kelvin - 273.15) * 9.0 / 5.0 + 32.0


def meters_per_second_to_kmh(mps: float) -> float:
    return mps * 3.6


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def wind_direction(degrees: float) -> str:
    """Map a bearing in degrees to a 16-point compass label."""
    index = int((degrees + 11.25) % 360.0 / 22.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def weather_emoji(condition: str) -> str:
    """Pick an icon for the provider's condition group (Clear, Rain, ...)."""
    return WEATHER_EMOJI.get(condition.lower(), DEFAULT_EMOJI)


def format_time(timestamp: int) -> str:
    """Render a Unix timestamp as HH:MM in the local time zone."""
    return datetime.fromtimestamp(timestamp).strftime("%H:%M")


def _local_time(timestamp: int, field: str) -> str:
    try:
        return format_time(timestamp)
    except (OverflowError, OSError, ValueError) as e:
        raise ParseError(f"Failed to parse weather data: {field}: {e}") from e


def _parse_error(e: ValidationError) -> ParseError:
    error = e.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "<root>"
    return ParseError(f"Failed to parse weather data: {field}: {error['msg']}")


class _Schema(BaseModel):
    # json.loads accepts NaN and Infinity
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class _Main(_Schema):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int


class _Condition(_Schema):
    main: str
    description: str


class _Wind(_Schema):
    speed: float
    deg: float | None = None


class _Sys(_Schema):
    sunrise: int
    sunset: int


class CurrentWeatherResponse(_Schema):
    """The subset of the provider's current-weather document we rely on."""

    name: str
    main: _Main
    weather: list[_Condition] = Field(min_length=1)
    wind: _Wind
    sys: _Sys


class WeatherReport(BaseModel):
    """
    Extracted, unit-converted conditions for one city.

    Temperatures are in the display unit given by ``unit``; wind speed is
    in km/h; sunrise and sunset are local ``HH:MM`` strings.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    location: str
    description: str
    condition: str
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    unit: str = "C"
    humidity: int
    wind_speed: float
    wind_direction: str
    sunrise: str
    sunset: str

    @classmethod
    def from_response(cls, data: dict[str, Any], fahrenheit: bool = False) -> "WeatherReport":
        """
        Build a report from a decoded provider document.

        Args:
            data: JSON document returned by the provider.
            fahrenheit: Convert temperatures to Fahrenheit instead of Celsius.

        Raises:
            ParseError: If a required field is missing, has the wrong type,
                or holds a value that cannot be displayed.
        """
        try:
            response = CurrentWeatherResponse.model_validate(data)
        except ValidationError as e:
            raise _parse_error(e) from e

        convert = kelvin_to_fahrenheit if fahrenheit else kelvin_to_celsius
        condition = response.weather[0]
        bearing = response.wind.deg

        # Finite inputs can still overflow to inf once converted
        try:
            return cls(
                location=response.name,
                description=condition.description,
                condition=condition.main,
                temperature=convert(response.main.temp),
                feels_like=convert(response.main.feels_like),
                temp_min=convert(response.main.temp_min),
                temp_max=convert(response.main.temp_max),
                unit="F" if fahrenheit else "C",
                humidity=response.main.humidity,
                wind_speed=meters_per_second_to_kmh(response.wind.speed),
                wind_direction=wind_direction(bearing) if bearing is not None else UNKNOWN_DIRECTION,
                sunrise=_local_time(response.sys.sunrise, "sys.sunrise"),
                sunset=_local_time(response.sys.sunset, "sys.sunset"),
            )
        except ValidationError as e:
            raise _parse_error(e) from e
